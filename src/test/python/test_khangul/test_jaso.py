#!/usr/bin/env python3
# -*- coding: utf-8 -*-


"""
jaso module tests
__author__ = 'Jamie (jamie.lim@kakaocorp.com)'
__copyright__ = 'Copyright (C) 2019-, Kakao Corp. All rights reserved.'
"""


###########
# imports #
###########
import unittest

from khangul.resource import jaso


#########
# tests #
#########
class TestClassify(unittest.TestCase):
    """
    code range classification tests
    """
    def test_choseong(self):
        """
        test is_choseong() and is_choseong_conjoinable()
        """
        self.assertTrue(jaso.is_choseong(0x1100))
        self.assertTrue(jaso.is_choseong(0x1159))
        self.assertFalse(jaso.is_choseong(0x10ff))
        self.assertFalse(jaso.is_choseong(0x115a))
        self.assertTrue(jaso.is_choseong_conjoinable(0x1112))
        self.assertFalse(jaso.is_choseong_conjoinable(0x1113))

    def test_jungseong(self):
        """
        test is_jungseong() and is_jungseong_conjoinable()
        """
        self.assertTrue(jaso.is_jungseong(0x1161))
        self.assertTrue(jaso.is_jungseong(0x11a2))
        self.assertFalse(jaso.is_jungseong(0x1160))
        self.assertFalse(jaso.is_jungseong(0x11a3))
        self.assertTrue(jaso.is_jungseong_conjoinable(0x1175))
        self.assertFalse(jaso.is_jungseong_conjoinable(0x1176))

    def test_jongseong(self):
        """
        test is_jongseong() and is_jongseong_conjoinable()
        """
        self.assertTrue(jaso.is_jongseong(0x11a8))
        self.assertTrue(jaso.is_jongseong(0x11f9))
        self.assertFalse(jaso.is_jongseong(0x11a7))
        self.assertFalse(jaso.is_jongseong(0x11fa))
        # filler is conjoinable though it is not a jongseong
        self.assertTrue(jaso.is_jongseong_conjoinable(0x11a7))
        self.assertTrue(jaso.is_jongseong_conjoinable(0x11c2))
        self.assertFalse(jaso.is_jongseong_conjoinable(0x11c3))

    def test_syllable(self):
        """
        test is_syllable()
        """
        self.assertTrue(jaso.is_syllable(ord('가')))
        self.assertTrue(jaso.is_syllable(ord('힣')))
        self.assertFalse(jaso.is_syllable(0xabff))
        self.assertFalse(jaso.is_syllable(0xd7a4))

    def test_jaso_and_jamo(self):
        """
        test is_jaso(), is_jamo() and is_halfwidth_jamo()
        """
        for code in [0x1100, 0x1161, 0x11a8]:
            self.assertTrue(jaso.is_jaso(code))
            self.assertFalse(jaso.is_jamo(code))
        self.assertFalse(jaso.is_jaso(0x3131))
        self.assertTrue(jaso.is_jamo(0x3131))
        self.assertTrue(jaso.is_jamo(0x318e))
        self.assertFalse(jaso.is_jamo(0x318f))
        self.assertFalse(jaso.is_jaso(ord('A')))
        self.assertTrue(jaso.is_halfwidth_jamo(0xffa1))
        self.assertFalse(jaso.is_halfwidth_jamo(0xffdd))

    def test_compat_letter_is_not_jaso(self):
        """
        compatibility letter belongs to none of jaso classes
        """
        code = 0x3131
        self.assertFalse(jaso.is_choseong(code))
        self.assertFalse(jaso.is_jungseong(code))
        self.assertFalse(jaso.is_jongseong(code))
        self.assertFalse(jaso.is_syllable(code))


class TestMapping(unittest.TestCase):
    """
    jaso mapping tests
    """
    def test_jaso_to_jamo(self):
        """
        test jaso_to_jamo()
        """
        self.assertEqual(jaso.jaso_to_jamo(0x1100), ord('ㄱ'))
        self.assertEqual(jaso.jaso_to_jamo(0x1112), ord('ㅎ'))
        self.assertEqual(jaso.jaso_to_jamo(0x1161), ord('ㅏ'))
        self.assertEqual(jaso.jaso_to_jamo(0x1175), ord('ㅣ'))
        self.assertEqual(jaso.jaso_to_jamo(0x11a8), ord('ㄱ'))
        self.assertEqual(jaso.jaso_to_jamo(0x11aa), ord('ㄳ'))
        self.assertEqual(jaso.jaso_to_jamo(0x11c2), ord('ㅎ'))
        # identity fallback
        for code in [0x11a7, 0x1113, 0x11c3, ord('A'), ord('가'), 0x3131]:
            self.assertEqual(jaso.jaso_to_jamo(code), code)

    def test_choseong_to_jongseong(self):
        """
        test choseong_to_jongseong()
        """
        self.assertEqual(jaso.choseong_to_jongseong(0x1100), 0x11a8)
        self.assertEqual(jaso.choseong_to_jongseong(0x110a), 0x11bb)
        self.assertEqual(jaso.choseong_to_jongseong(0x1112), 0x11c2)
        for code in [0x1104, 0x1108, 0x110d]:
            self.assertIsNone(jaso.choseong_to_jongseong(code))
        self.assertIsNone(jaso.choseong_to_jongseong(0x1113))
        self.assertIsNone(jaso.choseong_to_jongseong(0x11a8))

    def test_jongseong_to_choseong(self):
        """
        test jongseong_to_choseong()
        """
        self.assertEqual(jaso.jongseong_to_choseong(0x11a8), 0x1100)
        self.assertEqual(jaso.jongseong_to_choseong(0x11aa), 0x1109)    # ㄳ => ㅅ
        self.assertEqual(jaso.jongseong_to_choseong(0x11b0), 0x1100)    # ㄺ => ㄱ
        self.assertEqual(jaso.jongseong_to_choseong(0x11bb), 0x110a)
        self.assertEqual(jaso.jongseong_to_choseong(0x11c2), 0x1112)
        self.assertIsNone(jaso.jongseong_to_choseong(0x11a7))
        self.assertIsNone(jaso.jongseong_to_choseong(0x11c3))
        self.assertIsNone(jaso.jongseong_to_choseong(0x1100))

    def test_not_invertible(self):
        """
        jongseong => choseong => jongseong does not always come back
        """
        cho = jaso.jongseong_to_choseong(0x11b0)    # ㄺ
        self.assertEqual(jaso.choseong_to_jongseong(cho), 0x11a8)

    def test_jongseong_decompose(self):
        """
        test jongseong_decompose()
        """
        self.assertEqual(jaso.jongseong_decompose(0x11a8), (None, 0x1100))
        self.assertEqual(jaso.jongseong_decompose(0x11a9), (0x11a8, 0x1100))
        self.assertEqual(jaso.jongseong_decompose(0x11b9), (0x11b8, 0x1109))
        self.assertEqual(jaso.jongseong_decompose(0x11b6), (0x11af, 0x1112))
        self.assertEqual(jaso.jongseong_decompose(0x11c2), (None, 0x1112))
        self.assertEqual(jaso.jongseong_decompose(0x11a7), (None, None))
        self.assertEqual(jaso.jongseong_decompose(0x11c3), (None, None))

    def test_norm_compat(self):
        """
        test norm_compat()
        """
        self.assertEqual(jaso.norm_compat(''), '')
        self.assertEqual(jaso.norm_compat('\u1100\u1161\u11a8'), 'ㄱㅏㄱ')
        self.assertEqual(jaso.norm_compat('\uffa1\uffc2'), 'ㄱㅏ')
        self.assertEqual(jaso.norm_compat('\uac01 abc \u3131'), '\uac01 abc \u3131')


########
# main #
########
if __name__ == '__main__':
    unittest.main()
