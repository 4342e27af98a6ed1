# -*- coding: utf-8 -*-


"""
한글 자소 관련 유틸리티 모듈
코드 영역 판별, 호환 자모 변환, 초성/종성 간 변환
__author__ = 'Jamie (jamie.lim@kakaocorp.com)'
__copyright__ = 'Copyright (C) 2019-, Kakao Corp. All rights reserved.'
"""


###########
# imports #
###########
from typing import Optional, Tuple


#############
# constants #
#############
HANGUL_BASE = 0xAC00    # 첫 음절 '가'
HANGUL_LAST = 0xD7A3    # 마지막 음절 '힣'

CHOSEONG_BASE = 0x1100
JUNGSEONG_BASE = 0x1161
JONGSEONG_BASE = 0x11A7    # 종성 채움 문자가 0번 종성 역할을 한다.
JONGSEONG_FILLER = JONGSEONG_BASE

NUM_CHOSEONG = 19
NUM_JUNGSEONG = 21
NUM_JONGSEONG = 28    # 종성 없음(채움 문자) 포함

# 조합형 연산에 사용할 수 있는 현대 한글 자소의 마지막 코드
_CHOSEONG_CONJOINABLE_LAST = 0x1112
_JUNGSEONG_CONJOINABLE_LAST = 0x1175
_JONGSEONG_CONJOINABLE_LAST = 0x11C2

# 한글 자모 호환 영역 (초성과 종성이 같음. 두벌식 키보드로 입력할 때 들어가는 코드)
_CHOSEONG_COMPAT = [0x3131, 0x3132, 0x3134, 0x3137, 0x3138,    # 0x1100 ~ 0x1112
                    0x3139, 0x3141, 0x3142, 0x3143, 0x3145,
                    0x3146, 0x3147, 0x3148, 0x3149, 0x314a,
                    0x314b, 0x314c, 0x314d, 0x314e]
_JUNGSEONG_COMPAT = [0x314f, 0x3150, 0x3151, 0x3152, 0x3153,    # 0x1161 ~ 0x1175
                     0x3154, 0x3155, 0x3156, 0x3157, 0x3158,
                     0x3159, 0x315a, 0x315b, 0x315c, 0x315d,
                     0x315e, 0x315f, 0x3160, 0x3161, 0x3162,
                     0x3163]
_JONGSEONG_COMPAT = [0x3131, 0x3132, 0x3133, 0x3134, 0x3135,    # 0x11a8 ~ 0x11c2
                     0x3136, 0x3137, 0x3139, 0x313a, 0x313b,
                     0x313c, 0x313d, 0x313e, 0x313f, 0x3140,
                     0x3141, 0x3142, 0x3144, 0x3145, 0x3146,
                     0x3147, 0x3148, 0x314a, 0x314b, 0x314c,
                     0x314d, 0x314e]

# 반각 자모 영역 (호환 영역과 비슷하게 초성과 종성이 같으나 글자 폭이 절반인 코드)
_CHOSEONG_HALFWIDTH = [0xffa1, 0xffa2, 0xffa4, 0xffa7, 0xffa8,
                       0xffa9, 0xffb1, 0xffb2, 0xffb3, 0xffb5,
                       0xffb6, 0xffb7, 0xffb8, 0xffb9, 0xffba,
                       0xffbb, 0xffbc, 0xffbd, 0xffbe]
_JUNGSEONG_HALFWIDTH = [0xffc2, 0xffc3, 0xffc4, 0xffc5, 0xffc6,
                        0xffc7, 0xffca, 0xffcb, 0xffcc, 0xffcd,
                        0xffce, 0xffcf, 0xffd2, 0xffd3, 0xffd4,
                        0xffd5, 0xffd6, 0xffd7, 0xffda, 0xffdb,
                        0xffdc]
_JONGSEONG_HALFWIDTH = [0xffa1, 0xffa2, 0xffa3, 0xffa4, 0xffa5,
                        0xffa6, 0xffa7, 0xffa9, 0xffaa, 0xffab,
                        0xffac, 0xffad, 0xffae, 0xffaf, 0xffb0,
                        0xffb1, 0xffb2, 0xffb4, 0xffb5, 0xffb6,
                        0xffb7, 0xffb8, 0xffba, 0xffbb, 0xffbc,
                        0xffbd, 0xffbe]
_HALFWIDTH_TO_COMPAT = dict(zip(_CHOSEONG_HALFWIDTH + _JUNGSEONG_HALFWIDTH + _JONGSEONG_HALFWIDTH,
                                _CHOSEONG_COMPAT + _JUNGSEONG_COMPAT + _JONGSEONG_COMPAT))

# 초성 -> 종성. 쌍디귿, 쌍비읍, 쌍지읒은 종성으로 쓰이지 않는다.
_CHOSEONG_TO_JONGSEONG = [
    0x11a8,    # kiyeok
    0x11a9,    # ssangkiyeok
    0x11ab,    # nieun
    0x11ae,    # tikeut
    None,      # ssangtikeut
    0x11af,    # rieul
    0x11b7,    # mieum
    0x11b8,    # pieup
    None,      # ssangpieup
    0x11ba,    # sios
    0x11bb,    # ssangsios
    0x11bc,    # ieung
    0x11bd,    # cieuc
    None,      # ssangcieuc
    0x11be,    # chieuch
    0x11bf,    # khieukh
    0x11c0,    # thieuth
    0x11c1,    # phieuph
    0x11c2,    # hieuh
]

# 종성 -> 초성. 겹받침은 뒤쪽 자음의 초성으로 대응한다. (쌍기역, 쌍시옷은 그대로)
_JONGSEONG_TO_CHOSEONG = [
    0x1100,    # kiyeok
    0x1101,    # ssangkiyeok
    0x1109,    # kiyeok-sios
    0x1102,    # nieun
    0x110c,    # nieun-cieuc
    0x1112,    # nieun-hieuh
    0x1103,    # tikeut
    0x1105,    # rieul
    0x1100,    # rieul-kiyeok
    0x1106,    # rieul-mieum
    0x1107,    # rieul-pieup
    0x1109,    # rieul-sios
    0x1110,    # rieul-thieuth
    0x1111,    # rieul-phieuph
    0x1112,    # rieul-hieuh
    0x1106,    # mieum
    0x1107,    # pieup
    0x1109,    # pieup-sios
    0x1109,    # sios
    0x110a,    # ssangsios
    0x110b,    # ieung
    0x110c,    # cieuc
    0x110e,    # chieuch
    0x110f,    # khieukh
    0x1110,    # thieuth
    0x1111,    # phieuph
    0x1112,    # hieuh
]

# 종성 = (남는 종성, 다음 음절로 넘어가는 초성)
_JONGSEONG_DECOMPOSITION = [
    (None, 0x1100),      # kiyeok = cho kiyeok
    (0x11a8, 0x1100),    # ssangkiyeok = jong kiyeok + cho kiyeok
    (0x11a8, 0x1109),    # kiyeok-sios = jong kiyeok + cho sios
    (None, 0x1102),      # nieun = cho nieun
    (0x11ab, 0x110c),    # nieun-cieuc = jong nieun + cho cieuc
    (0x11ab, 0x1112),    # nieun-hieuh = jong nieun + cho hieuh
    (None, 0x1103),      # tikeut = cho tikeut
    (None, 0x1105),      # rieul = cho rieul
    (0x11af, 0x1100),    # rieul-kiyeok = jong rieul + cho kiyeok
    (0x11af, 0x1106),    # rieul-mieum = jong rieul + cho mieum
    (0x11af, 0x1107),    # rieul-pieup = jong rieul + cho pieup
    (0x11af, 0x1109),    # rieul-sios = jong rieul + cho sios
    (0x11af, 0x1110),    # rieul-thieuth = jong rieul + cho thieuth
    (0x11af, 0x1111),    # rieul-phieuph = jong rieul + cho phieuph
    (0x11af, 0x1112),    # rieul-hieuh = jong rieul + cho hieuh
    (None, 0x1106),      # mieum = cho mieum
    (None, 0x1107),      # pieup = cho pieup
    (0x11b8, 0x1109),    # pieup-sios = jong pieup + cho sios
    (None, 0x1109),      # sios = cho sios
    (0x11ba, 0x1109),    # ssangsios = jong sios + cho sios
    (None, 0x110b),      # ieung = cho ieung
    (None, 0x110c),      # cieuc = cho cieuc
    (None, 0x110e),      # chieuch = cho chieuch
    (None, 0x110f),      # khieukh = cho khieukh
    (None, 0x1110),      # thieuth = cho thieuth
    (None, 0x1111),      # phieuph = cho phieuph
    (None, 0x1112),      # hieuh = cho hieuh
]


#############
# functions #
#############
def is_choseong(c: int) -> bool:
    """
    초성(leading consonant) 영역인 지 여부. 옛한글 초성을 포함한다.
    Args:
        c:  유니코드 코드 값
    Returns:
        초성 여부
    """
    return 0x1100 <= c <= 0x1159


def is_jungseong(c: int) -> bool:
    """
    중성(vowel) 영역인 지 여부. 옛한글 중성을 포함한다.
    Args:
        c:  유니코드 코드 값
    Returns:
        중성 여부
    """
    return 0x1161 <= c <= 0x11a2


def is_jongseong(c: int) -> bool:
    """
    종성(trailing consonant) 영역인 지 여부. 옛한글 종성을 포함하고 채움 문자는 제외한다.
    Args:
        c:  유니코드 코드 값
    Returns:
        종성 여부
    """
    return 0x11a8 <= c <= 0x11f9


def is_choseong_conjoinable(c: int) -> bool:
    """
    음절 조합 연산에 사용할 수 있는 (현대 한글) 초성인 지 여부
    """
    return CHOSEONG_BASE <= c <= _CHOSEONG_CONJOINABLE_LAST


def is_jungseong_conjoinable(c: int) -> bool:
    """
    음절 조합 연산에 사용할 수 있는 (현대 한글) 중성인 지 여부
    """
    return JUNGSEONG_BASE <= c <= _JUNGSEONG_CONJOINABLE_LAST


def is_jongseong_conjoinable(c: int) -> bool:
    """
    음절 조합 연산에 사용할 수 있는 (현대 한글) 종성인 지 여부. 채움 문자를 포함한다.
    """
    return JONGSEONG_BASE <= c <= _JONGSEONG_CONJOINABLE_LAST


def is_syllable(c: int) -> bool:
    """
    완성형 한글 음절 영역(U+AC00 ~ U+D7A3)인 지 여부
    """
    return HANGUL_BASE <= c <= HANGUL_LAST


def is_jaso(c: int) -> bool:
    """
    초성, 중성, 종성 중 하나인 지 여부
    """
    return is_choseong(c) or is_jungseong(c) or is_jongseong(c)


def is_jamo(c: int) -> bool:
    """
    호환 자모 영역(U+3131 ~ U+318E)인 지 여부. 자소 영역과 겹치지 않는다.
    """
    return 0x3131 <= c <= 0x318e


def is_halfwidth_jamo(c: int) -> bool:
    """
    반각 자모 영역(U+FFA0 ~ U+FFDC)인 지 여부
    """
    return 0xffa0 <= c <= 0xffdc


def jaso_to_jamo(c: int) -> int:
    """
    현대 한글 자소를 호환 자모로 변환한다.
    Args:
        c:  유니코드 코드 값
    Returns:
        호환 자모. 변환할 수 없는 경우 입력 값 그대로
    """
    if CHOSEONG_BASE <= c <= _CHOSEONG_CONJOINABLE_LAST:
        return _CHOSEONG_COMPAT[c - CHOSEONG_BASE]
    if JUNGSEONG_BASE <= c <= _JUNGSEONG_CONJOINABLE_LAST:
        return _JUNGSEONG_COMPAT[c - JUNGSEONG_BASE]
    if JONGSEONG_FILLER < c <= _JONGSEONG_CONJOINABLE_LAST:
        return _JONGSEONG_COMPAT[c - JONGSEONG_FILLER - 1]
    return c


def choseong_to_jongseong(c: int) -> Optional[int]:
    """
    초성을 같은 소리의 종성으로 변환한다.
    Args:
        c:  초성 코드 값
    Returns:
        종성 코드 값. 대응하는 종성이 없거나 현대 한글 초성이 아니면 None
    """
    if not is_choseong_conjoinable(c):
        return None
    return _CHOSEONG_TO_JONGSEONG[c - CHOSEONG_BASE]


def jongseong_to_choseong(c: int) -> Optional[int]:
    """
    종성을 같은 소리의 초성으로 변환한다. 겹받침은 뒤쪽 자음에 해당하는 초성이 된다.
    여러 종성이 하나의 초성으로 변환되므로 역변환이 원래 값을 보장하지 않는다.
    Args:
        c:  종성 코드 값
    Returns:
        초성 코드 값. 현대 한글 종성이 아니면 None
    """
    if not JONGSEONG_FILLER < c <= _JONGSEONG_CONJOINABLE_LAST:
        return None
    return _JONGSEONG_TO_CHOSEONG[c - JONGSEONG_FILLER - 1]


def jongseong_decompose(c: int) -> Tuple[Optional[int], Optional[int]]:
    """
    종성을 음절에 남는 종성과 다음 음절의 초성으로 나눈다.
    받침 뒤에 모음이 입력되거나 지울 때 앞 음절을 다시 구성하기 위해 사용한다.
    e.g. 0x11b9(ㅄ) => (0x11b8(ㅂ), 0x1109(ㅅ)), 0x11ab(ㄴ) => (None, 0x1102(ㄴ))
    Args:
        c:  종성 코드 값
    Returns:
        (남는 종성, 넘어가는 초성) pair. 현대 한글 종성이 아니면 (None, None)
    """
    if not JONGSEONG_FILLER < c <= _JONGSEONG_CONJOINABLE_LAST:
        return None, None
    return _JONGSEONG_DECOMPOSITION[c - JONGSEONG_FILLER - 1]


def norm_compat(text: str) -> str:
    """
    유니코드 내 한글 자소와 반각 자모를 호환 영역으로 정규화한다.
    Args:
        text:  한글 텍스트
    Returns:
        자소가 호환 영역으로 정규화된 텍스트
    """
    if not text:
        return text

    normalized = []
    for char in text:
        code = ord(char)
        if code in _HALFWIDTH_TO_COMPAT:
            normalized.append(chr(_HALFWIDTH_TO_COMPAT[code]))
        else:
            normalized.append(chr(jaso_to_jamo(code)))
    return ''.join(normalized)
