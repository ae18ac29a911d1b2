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

from .content_protection import ContentProtection
from .descriptor import AudioChannelConfiguration
from .fields import UNSIGNED, xml_attribute, xml_element
from .mpd_element import MpdElement
from .segment_template import SegmentTemplate

@dataclass(slots=True, kw_only=True)
class Representation(MpdElement):
    id: str | None = xml_attribute('id')
    width: int | None = xml_attribute('width', UNSIGNED)
    height: int | None = xml_attribute('height', UNSIGNED)
    frameRate: str | None = xml_attribute('frameRate')
    bandwidth: int | None = xml_attribute('bandwidth', UNSIGNED)
    audioSamplingRate: str | None = xml_attribute('audioSamplingRate')
    codecs: str | None = xml_attribute('codecs')
    contentProtection: list[ContentProtection] = xml_element(
        'ContentProtection', ListOf(ContentProtection))
    segmentTemplate: SegmentTemplate | None = xml_element(
        'SegmentTemplate', SegmentTemplate)
    scanType: str | None = xml_attribute('scanType')
    audioChannelConfiguration: AudioChannelConfiguration | None = xml_element(
        'AudioChannelConfiguration', AudioChannelConfiguration)
