from .header_decoder import HeaderDecoder
from .record_decoder import RecordDecoder

__all__ = ["HeaderDecoder", "RecordDecoder"]
