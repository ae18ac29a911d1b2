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

from .fields import xml_attribute, xml_element, xml_namespace, xml_text
from .mpd_element import MpdElement

@dataclass(slots=True, kw_only=True)
class Pssh(MpdElement):
    """
    Base64 encoded PSSH box, in the cenc namespace
    """

    value: str | None = xml_text()
    cenc: str | None = xml_namespace('cenc')


@dataclass(slots=True, kw_only=True)
class Pro(MpdElement):
    """
    Base64 encoded PlayReady Object, in the mspr namespace
    """

    value: str | None = xml_text()
    mspr: str | None = xml_namespace('mspr')


@dataclass(slots=True, kw_only=True)
class ContentProtection(MpdElement):
    schemeIdUri: str | None = xml_attribute('schemeIdUri')
    value: str | None = xml_attribute('value')
    default_KID: str | None = xml_attribute('default_KID', prefix='cenc')
    cenc: str | None = xml_namespace('cenc')
    pssh: Pssh | None = xml_element('pssh', Pssh, prefix='cenc')
    pro: Pro | None = xml_element('pro', Pro, prefix='mspr')
