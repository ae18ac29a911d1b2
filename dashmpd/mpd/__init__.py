from .adaptation_set import AdaptationSet
from .codec import decode, encode
from .conditional_uint import ConditionalKind, ConditionalUint
from .content_protection import ContentProtection, Pro, Pssh
from .descriptor import AudioChannelConfiguration, Descriptor
from .events import Event, EventStream, ProgramEventStream
from .exceptions import MalformedDocument, MalformedUnion, SerializationError
from .manifest import MPD
from .namespaces import CENC_NAMESPACE, DASH_NAMESPACE, MSPR_NAMESPACE
from .options import MpdCodecOptions
from .period import Period
from .representation import Representation
from .rewrite import rewrite_manifest
from .segment_template import SegmentTemplate, SegmentTimeline, SegmentTimelineSegment
from .serializer import MpdSerializer

__all__ = [
    "AdaptationSet",
    "AudioChannelConfiguration",
    "CENC_NAMESPACE",
    "ConditionalKind",
    "ConditionalUint",
    "ContentProtection",
    "DASH_NAMESPACE",
    "Descriptor",
    "Event",
    "EventStream",
    "MalformedDocument",
    "MalformedUnion",
    "MPD",
    "MpdCodecOptions",
    "MpdSerializer",
    "MSPR_NAMESPACE",
    "Period",
    "Pro",
    "ProgramEventStream",
    "Pssh",
    "Representation",
    "SegmentTemplate",
    "SegmentTimeline",
    "SegmentTimelineSegment",
    "SerializationError",
    "decode",
    "encode",
    "rewrite_manifest",
]
