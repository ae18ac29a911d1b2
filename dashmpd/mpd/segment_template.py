#############################################################################
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.
#
#############################################################################
#
#  Project Name        :    MPEG DASH manifest codec
#
#  Author              :    Alex Ashley
#
#############################################################################
from dataclasses import dataclass

from dashmpd.utils.list_of import ListOf

from .fields import SIGNED, UNSIGNED, UNSIGNED_INT, xml_attribute, xml_element
from .mpd_element import MpdElement

@dataclass(slots=True, kw_only=True)
class SegmentTimelineSegment(MpdElement):
    """
    One S entry of a SegmentTimeline. A negative repeat count means
    "repeat until the start of the next S entry", but it is stored
    unmodified.
    """

    t: int | None = xml_attribute('t', UNSIGNED)
    d: int = xml_attribute('d', UNSIGNED, required=True)
    r: int | None = xml_attribute('r', SIGNED)


@dataclass(slots=True, kw_only=True)
class SegmentTimeline(MpdElement):
    segments: list[SegmentTimelineSegment] = xml_element(
        'S', ListOf(SegmentTimelineSegment))


@dataclass(slots=True, kw_only=True)
class SegmentTemplate(MpdElement):
    timescale: int | None = xml_attribute('timescale', UNSIGNED)
    media: str | None = xml_attribute('media')
    initialization: str | None = xml_attribute('initialization')
    startNumber: int | None = xml_attribute('startNumber', UNSIGNED)
    presentationTimeOffset: int | None = xml_attribute('presentationTimeOffset', UNSIGNED)
    duration: int | None = xml_attribute('duration', UNSIGNED_INT)
    segmentTimelines: list[SegmentTimeline] = xml_element(
        'SegmentTimeline', ListOf(SegmentTimeline))
