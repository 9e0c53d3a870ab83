from .index_decoder import IndexDecoder

__all__ = ["IndexDecoder"]
