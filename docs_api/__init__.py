"""
docs_api — access to the remote document service.

Public API:
  get_access_token(credentials_dir)   -> str
  DocsClient(token)                   get_document / batch_update / create_document /
                                      copy_document / move_to_folder
  DocumentService                     Protocol implemented by DocsClient
"""

from .auth import get_access_token, credentials_dir
from .client import DocsClient, DocumentService

__all__ = [
    "get_access_token",
    "credentials_dir",
    "DocsClient",
    "DocumentService",
]
