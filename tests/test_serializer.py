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
from pathlib import Path
import unittest

from lxml import etree

from dashmpd.mpd import (
    AdaptationSet, ConditionalUint, ContentProtection, MPD, MpdSerializer,
    Period, Pro, Pssh, Representation, SegmentTemplate, SegmentTimeline,
    SegmentTimelineSegment, CENC_NAMESPACE, DASH_NAMESPACE, MSPR_NAMESPACE
)
from dashmpd.mpd.exceptions import MalformedDocument, MalformedUnion, SerializationError
from dashmpd.mpd.fields import XmlKind, xml_attribute, xml_element
from dashmpd.mpd.mpd_element import MpdElement

@dataclass(slots=True, kw_only=True)
class Label(MpdElement):
    lang: str | None = xml_attribute('lang')
    title: str = xml_element('Title', str, omit_empty=False)


class SerializerTests(unittest.TestCase):
    FIXTURES_PATH = Path(__file__).parent / "fixtures"

    def setUp(self) -> None:
        self.serializer = MpdSerializer()

    def load_fixture(self) -> bytes:
        with open(self.FIXTURES_PATH / "encrypted.mpd", 'rb') as src:
            return src.read()

    def test_decode_fixture(self) -> None:
        mpd = self.serializer.from_bytes(self.load_fixture())
        self.assertEqual(mpd.xmlns, DASH_NAMESPACE)
        self.assertEqual(mpd.cenc, CENC_NAMESPACE)
        self.assertEqual(mpd.mspr, MSPR_NAMESPACE)
        self.assertEqual(mpd.type, 'static')
        self.assertEqual(mpd.mediaPresentationDuration, 'PT1M10S')
        self.assertIsNone(mpd.publishTime)
        self.assertEqual(mpd.profiles, 'urn:mpeg:dash:profile:isoff-live:2011')
        self.assertEqual(mpd.BaseURL, 'https://example.com/media/')
        self.assertEqual(len(mpd.periods), 1)
        period = mpd.periods[0]
        self.assertEqual(period.id, 'p0')
        self.assertEqual(period.start, 'PT0S')
        self.assertIsNone(period.duration)
        self.assertEqual(period.BaseURL, '')
        self.assertEqual(period.supplementalProperty.value, 'p1')
        self.assertEqual(len(period.eventStreams), 1)
        self.assertEqual(period.programEventStreams, [])
        events = period.eventStreams[0]
        self.assertEqual(events.timescale, 1000)
        self.assertEqual([ev.presentationTime for ev in events.events], [0, 10000])
        self.assertEqual(
            [a.mimeType for a in period.adaptationSets], ['video/mp4', 'audio/mp4'])

    def test_decode_adaptation_set(self) -> None:
        mpd = self.serializer.from_bytes(self.load_fixture())
        video = mpd.periods[0].adaptationSets[0]
        self.assertEqual(video.segmentAlignment, ConditionalUint(True))
        self.assertEqual(video.subsegmentAlignment, ConditionalUint(2))
        self.assertEqual(video.startWithSAP, 1)
        self.assertIsNone(video.subsegmentStartsWithSAP)
        self.assertFalse(video.bitstreamSwitching)
        self.assertIsNotNone(video.bitstreamSwitching)
        self.assertEqual(video.frameRate, '25')
        self.assertEqual([r.id for r in video.representations], ['v1', 'v2'])
        self.assertEqual(video.representations[0].width, 1280)
        self.assertEqual(video.representations[0].bandwidth, 2500000)
        audio = mpd.periods[0].adaptationSets[1]
        self.assertEqual(audio.segmentAlignment, ConditionalUint(0))
        self.assertTrue(audio.subsegmentAlignment.is_absent())
        self.assertEqual(audio.lang, 'en')
        rep = audio.representations[0]
        self.assertEqual(rep.audioSamplingRate, '48000')
        self.assertEqual(rep.segmentTemplate.duration, 192000)
        self.assertEqual(rep.audioChannelConfiguration.value, '2')

    def test_decode_content_protection(self) -> None:
        mpd = self.serializer.from_bytes(self.load_fixture())
        cps = mpd.periods[0].adaptationSets[0].contentProtection
        self.assertEqual(len(cps), 3)
        self.assertEqual(cps[0].default_KID, '1ab45440-532c-4399-94dc-5c5ad9584bac')
        self.assertIsNone(cps[0].cenc)
        self.assertIsNone(cps[0].pssh)
        self.assertTrue(cps[1].pssh.value.startswith('AAAANHBzc2g'))
        # the cenc namespace is declared on the MPD element, not on pssh
        self.assertIsNone(cps[1].pssh.cenc)
        self.assertIsNone(cps[1].pro)
        self.assertEqual(cps[2].value, 'MSPR 2.0')
        self.assertEqual(cps[2].pro.value, 'VAMAAAEAAQBKAzwAVwBSAE0ASABFAEEARABFAFIA')
        self.assertIsNone(cps[2].pro.mspr)

    def test_decode_segment_timeline(self) -> None:
        mpd = self.serializer.from_bytes(self.load_fixture())
        template = mpd.periods[0].adaptationSets[0].segmentTemplate
        self.assertEqual(template.timescale, 25000)
        self.assertEqual(template.startNumber, 1)
        self.assertEqual(template.presentationTimeOffset, 0)
        self.assertIsNone(template.duration)
        self.assertEqual(len(template.segmentTimelines), 1)
        segments = template.segmentTimelines[0].segments
        self.assertEqual(segments, [
            SegmentTimelineSegment(t=0, d=100000, r=13),
            SegmentTimelineSegment(d=50000),
            SegmentTimelineSegment(t=1500000, d=100000, r=-1),
        ])

    def test_namespace_declared_on_element(self) -> None:
        xml = (
            '<MPD profiles="">'
            '<Period><AdaptationSet mimeType="video/mp4">'
            '<ContentProtection xmlns:cenc="urn:mpeg:cenc:2013" cenc:default_KID="1234">'
            '<cenc:pssh xmlns:cenc="urn:mpeg:cenc:2013">AAAA</cenc:pssh>'
            '</ContentProtection>'
            '</AdaptationSet></Period></MPD>')
        mpd = self.serializer.from_bytes(xml)
        self.assertIsNone(mpd.xmlns)
        self.assertIsNone(mpd.cenc)
        cp = mpd.periods[0].adaptationSets[0].contentProtection[0]
        self.assertEqual(cp.cenc, CENC_NAMESPACE)
        self.assertEqual(cp.default_KID, '1234')
        self.assertEqual(cp.pssh, Pssh(value='AAAA', cenc=CENC_NAMESPACE))

    def test_bare_namespace_markers(self) -> None:
        xml = (
            '<MPD cenc="urn:mpeg:cenc:2013" profiles="p">'
            '<Period><AdaptationSet mimeType="video/mp4"><ContentProtection>'
            '<pssh cenc="urn:mpeg:cenc:2013">AAAA</pssh>'
            '</ContentProtection></AdaptationSet></Period></MPD>')
        mpd = self.serializer.from_bytes(xml.encode('utf-8'))
        self.assertEqual(mpd.cenc, CENC_NAMESPACE)
        pssh = mpd.periods[0].adaptationSets[0].contentProtection[0].pssh
        self.assertEqual(pssh.cenc, CENC_NAMESPACE)

    def test_unknown_elements_are_ignored(self) -> None:
        xml = (
            '<MPD profiles="p" foo="bar"><!-- comment -->'
            '<UTCTiming schemeIdUri="urn:mpeg:dash:utc:direct:2014"/>'
            '<Period id="1"/></MPD>')
        mpd = self.serializer.from_bytes(xml)
        self.assertEqual(mpd.periods, [Period(id='1')])

    def test_decode_into_existing_document(self) -> None:
        mpd = MPD(type='dynamic', profiles='old', periods=[Period(id='old')])
        result = self.serializer.from_bytes('<MPD profiles="new"><Period id="a"/></MPD>', mpd)
        self.assertIs(result, mpd)
        self.assertIsNone(mpd.type)
        self.assertEqual(mpd.profiles, 'new')
        self.assertEqual(mpd.periods, [Period(id='a')])

    def test_malformed_document(self) -> None:
        for xml in [b'<MPD', b'<MPD></Period>', b'not xml at all', b'<MPD/><MPD/>']:
            with self.assertRaises(MalformedDocument) as ctx:
                self.serializer.from_bytes(xml)
            self.assertIsInstance(ctx.exception.reason, etree.XMLSyntaxError)

    def test_empty_document(self) -> None:
        with self.assertRaises(MalformedDocument):
            self.serializer.from_bytes(b'')

    def test_wrong_root_element(self) -> None:
        with self.assertRaises(MalformedDocument):
            self.serializer.from_bytes(b'<Period id="1"/>')

    def test_invalid_attribute_value(self) -> None:
        tests = [
            '<MPD><Period><AdaptationSet startWithSAP="one"/></Period></MPD>',
            '<MPD><Period><AdaptationSet bitstreamSwitching="maybe"/></Period></MPD>',
            '<MPD><Period><AdaptationSet><Representation width="-5"/>'
            '</AdaptationSet></Period></MPD>',
        ]
        for xml in tests:
            with self.assertRaises(MalformedDocument) as ctx:
                self.serializer.from_bytes(xml)
            self.assertIsInstance(ctx.exception.reason, ValueError)

    def test_invalid_conditional_uint(self) -> None:
        xml = '<MPD><Period><AdaptationSet segmentAlignment="abc"/></Period></MPD>'
        with self.assertRaises(MalformedUnion) as ctx:
            self.serializer.from_bytes(xml)
        self.assertEqual(ctx.exception.name, 'segmentAlignment')
        self.assertEqual(ctx.exception.text, 'abc')

    def test_encode_omits_absent_fields(self) -> None:
        mpd = MPD(profiles='p', periods=[
            Period(adaptationSets=[AdaptationSet(representations=[Representation(id='1')])])])
        text = self.serializer.to_string(mpd)
        self.assertEqual(text, '\n'.join([
            '<MPD profiles="p">',
            '  <Period>',
            '    <AdaptationSet mimeType="">',
            '      <Representation id="1"/>',
            '    </AdaptationSet>',
            '  </Period>',
            '</MPD>',
        ]))

    def test_encode_default_namespace(self) -> None:
        mpd = MPD(xmlns=DASH_NAMESPACE, cenc=CENC_NAMESPACE, profiles='p',
                  BaseURL='http://example.com/')
        root = self.serializer.to_element(mpd)
        self.assertEqual(root.tag, f'{{{DASH_NAMESPACE}}}MPD')
        self.assertEqual(root.get('cenc'), CENC_NAMESPACE)
        self.assertEqual(root[0].tag, f'{{{DASH_NAMESPACE}}}BaseURL')
        text = self.serializer.to_string(mpd)
        self.assertTrue(text.startswith(
            f'<MPD xmlns="{DASH_NAMESPACE}" cenc="{CENC_NAMESPACE}" profiles="p">'))

    def test_encode_attribute_order(self) -> None:
        rep = Representation(codecs='avc1', bandwidth=100, id='5', width=10, height=20)
        root = self.serializer.to_element(MPD(periods=[Period(adaptationSets=[
            AdaptationSet(mimeType='video/mp4', representations=[rep])])]))
        elt = root[0][0][0]
        self.assertEqual(list(elt.attrib.keys()),
                         ['id', 'width', 'height', 'bandwidth', 'codecs'])

    def test_encode_empty_timeline(self) -> None:
        template = SegmentTemplate(timescale=1, segmentTimelines=[SegmentTimeline()])
        mpd = MPD(periods=[Period(adaptationSets=[
            AdaptationSet(segmentTemplate=template)])])
        text = self.serializer.to_string(mpd)
        self.assertIn('<SegmentTimeline/>', text)

    def test_encode_invalid_values(self) -> None:
        tests = [
            Representation(width=-1),
            Representation(bandwidth='500000'),
            Representation(id=12),
        ]
        for rep in tests:
            mpd = MPD(periods=[Period(adaptationSets=[
                AdaptationSet(representations=[rep])])])
            with self.assertLogs('dashmpd.mpd.serializer', level='ERROR'):
                with self.assertRaises(SerializationError):
                    self.serializer.to_string(mpd)

    def test_element_not_omitted_when_empty(self) -> None:
        root = etree.Element('Labels')
        self.serializer.encode_fields(root, Label(), None)
        self.assertEqual(etree.tostring(root), b'<Labels><Title></Title></Labels>')
        kinds = [binding.kind for _, binding in Label.xml_bindings()]
        self.assertEqual(kinds, [XmlKind.ATTRIBUTE, XmlKind.ELEMENT])

    def test_construct_from_dictionaries(self) -> None:
        mpd = MPD(profiles='p', periods=[{
            'id': 'p1',
            'adaptationSets': [{
                'mimeType': 'audio/mp4',
                'segmentAlignment': True,
                'representations': [{'id': 'a1', 'bandwidth': 64000}],
            }],
        }])
        adp = mpd.periods[0].adaptationSets[0]
        self.assertIsInstance(adp, AdaptationSet)
        self.assertEqual(adp.segmentAlignment, ConditionalUint(True))
        self.assertEqual(adp.representations, [Representation(id='a1', bandwidth=64000)])
        cp = ContentProtection(pssh={'value': 'AAAA'})
        self.assertEqual(cp.pssh, Pssh(value='AAAA'))

    def test_undeclared_prefixes(self) -> None:
        cp = ContentProtection(default_KID='1234', pro=Pro(value='BBBB'))
        mpd = MPD(profiles='p', periods=[Period(adaptationSets=[
            AdaptationSet(mimeType='video/mp4', contentProtection=[cp])])])
        self.assertEqual(self.serializer.undeclared_prefixes(mpd), {'cenc', 'mspr'})
        root = self.serializer.to_element(mpd)
        self.assertEqual(root.get('cenc'), CENC_NAMESPACE)
        self.assertEqual(root.get('mspr'), MSPR_NAMESPACE)
        self.assertIsNone(mpd.cenc)
        cp.pro = Pro(value='BBBB', mspr=MSPR_NAMESPACE)
        mpd.cenc = CENC_NAMESPACE
        self.assertEqual(self.serializer.undeclared_prefixes(mpd), set())


if __name__ == "__main__":
    unittest.main()
