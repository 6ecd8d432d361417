from .fetch_repo_tree import decode_tree, enumerate_repository, fetch_tree

__all__ = ["decode_tree", "enumerate_repository", "fetch_tree"]
