from .client import StorageError, StoredObject, SupabaseStorageClient, split_public_url

__all__ = ["StorageError", "StoredObject", "SupabaseStorageClient", "split_public_url"]
