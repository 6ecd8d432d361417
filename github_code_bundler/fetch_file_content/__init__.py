from .fetch_file_content import admit, fetch_candidates
from .transports import ContentsApiTransport, FileTransport, RawHostTransport, select_transport

__all__ = [
    "admit",
    "fetch_candidates",
    "ContentsApiTransport",
    "FileTransport",
    "RawHostTransport",
    "select_transport",
]
