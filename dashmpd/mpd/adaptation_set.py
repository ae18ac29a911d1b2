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

from .conditional_uint import ConditionalUint
from .content_protection import ContentProtection
from .fields import BOOLEAN, CONDITIONAL_UINT, UNSIGNED, xml_attribute, xml_element
from .mpd_element import MpdElement
from .representation import Representation
from .segment_template import SegmentTemplate

@dataclass(slots=True, kw_only=True)
class AdaptationSet(MpdElement):
    mimeType: str = xml_attribute('mimeType', required=True)
    segmentAlignment: ConditionalUint = xml_attribute(
        'segmentAlignment', CONDITIONAL_UINT)
    subsegmentAlignment: ConditionalUint = xml_attribute(
        'subsegmentAlignment', CONDITIONAL_UINT)
    startWithSAP: int | None = xml_attribute('startWithSAP', UNSIGNED)
    subsegmentStartsWithSAP: int | None = xml_attribute(
        'subsegmentStartsWithSAP', UNSIGNED)
    bitstreamSwitching: bool | None = xml_attribute('bitstreamSwitching', BOOLEAN)
    lang: str | None = xml_attribute('lang')
    contentProtection: list[ContentProtection] = xml_element(
        'ContentProtection', ListOf(ContentProtection))
    representations: list[Representation] = xml_element(
        'Representation', ListOf(Representation))
    frameRate: str | None = xml_attribute('frameRate')
    segmentTemplate: SegmentTemplate | None = xml_element(
        'SegmentTemplate', SegmentTemplate)
