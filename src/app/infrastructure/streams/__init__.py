from src.app.infrastructure.streams.client import StreamsClient
from src.app.infrastructure.streams.recorder import StreamRecorder
from src.app.infrastructure.streams.serializers import decode_record, encode_record

__all__ = [
    "StreamsClient",
    "StreamRecorder",
    "decode_record",
    "encode_record",
]
