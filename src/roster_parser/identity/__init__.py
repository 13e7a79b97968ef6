from .uuid_factory import new_id

__all__ = ["new_id"]
