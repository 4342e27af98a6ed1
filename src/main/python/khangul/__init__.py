# -*- coding: utf-8 -*-


"""
khangul: 한글 자소 분류 및 자소/음절 조합, 분해 라이브러리
__author__ = 'Jamie (jamie.lim@kakaocorp.com)'
__copyright__ = 'Copyright (C) 2019-, Kakao Corp. All rights reserved.'
"""


###########
# imports #
###########
from khangul.convert import Span, compose_text, decompose_compat, decompose_text, \
    iter_syllables, jamos_to_syllables, jamos_to_syllables_into
from khangul.khangul import KhangulExcept, Options
from khangul.resource.cluster import choseong_compress, jongseong_compress, jungseong_compress
from khangul.resource.jaso import is_choseong, is_jungseong, is_jongseong, \
    is_choseong_conjoinable, is_jungseong_conjoinable, is_jongseong_conjoinable, \
    is_syllable, is_jaso, is_jamo, is_halfwidth_jamo, jaso_to_jamo, \
    choseong_to_jongseong, jongseong_to_choseong, jongseong_decompose, norm_compat
from khangul.syllable import build_syllable, is_syllable_boundary, jaso_to_syllable, \
    syllable_len, syllable_to_jaso
