"""
Encoder and decoder for MPEG DASH Media Presentation Description documents
"""
import logging

from .mpd import (
    AdaptationSet,
    AudioChannelConfiguration,
    CENC_NAMESPACE,
    ConditionalKind,
    ConditionalUint,
    ContentProtection,
    DASH_NAMESPACE,
    Descriptor,
    Event,
    EventStream,
    MalformedDocument,
    MalformedUnion,
    MPD,
    MpdCodecOptions,
    MpdSerializer,
    MSPR_NAMESPACE,
    Period,
    Pro,
    ProgramEventStream,
    Pssh,
    Representation,
    SegmentTemplate,
    SegmentTimeline,
    SegmentTimelineSegment,
    SerializationError,
    decode,
    encode,
    rewrite_manifest,
)
from .mpd import __all__  # noqa: F401

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
