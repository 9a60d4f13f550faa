"""Amazon Polly speakers.

Available backends:
- PollySpeakerV1: legacy botocore client
- PollySpeakerV2: boto3 client with service-model validation
"""

from speech.polly.errors import decode_error_v1, decode_error_v2
from speech.polly.transport import Boto3Transport, BotocoreTransport, PollyTransport
from speech.polly.v1 import PollySpeakerV1
from speech.polly.v2 import PollySpeakerV2

__all__ = [
    # Backends
    "PollySpeakerV1",
    "PollySpeakerV2",
    # Transports
    "PollyTransport",
    "BotocoreTransport",
    "Boto3Transport",
    # Errors
    "decode_error_v1",
    "decode_error_v2",
]
