# -*- coding: utf-8 -*-


"""
자소와 음절 간의 조합/분해 및 음절 경계 판단 모듈
__author__ = 'Jamie (jamie.lim@kakaocorp.com)'
__copyright__ = 'Copyright (C) 2019-, Kakao Corp. All rights reserved.'
"""


###########
# imports #
###########
from typing import Optional, Sequence, Tuple

from khangul.resource.cluster import choseong_compress, jongseong_compress, jungseong_compress
from khangul.resource.jaso import CHOSEONG_BASE, JUNGSEONG_BASE, JONGSEONG_BASE, \
    JONGSEONG_FILLER, HANGUL_BASE, NUM_JUNGSEONG, NUM_JONGSEONG
from khangul.resource.jaso import is_choseong, is_jungseong, is_jongseong, is_syllable, \
    is_choseong_conjoinable, is_jungseong_conjoinable, is_jongseong_conjoinable


#############
# functions #
#############
def jaso_to_syllable(cho: int, jung: int, jong: Optional[int] = None) -> Optional[int]:
    """
    초성, 중성, 종성을 조합하여 음절을 만든다.
    Args:
        cho:  초성
        jung:  중성
        jong:  종성. None, 0, 종성 채움 문자는 모두 종성 없음
    Returns:
        음절 코드 값. 현대 한글 자소가 아니어서 조합할 수 없으면 None
    """
    if not jong:
        jong = JONGSEONG_FILLER
    if not is_choseong_conjoinable(cho):
        return None
    if not is_jungseong_conjoinable(jung):
        return None
    if not is_jongseong_conjoinable(jong):
        return None

    cho_idx = cho - CHOSEONG_BASE
    jung_idx = jung - JUNGSEONG_BASE
    jong_idx = jong - JONGSEONG_BASE
    return (cho_idx * NUM_JUNGSEONG + jung_idx) * NUM_JONGSEONG + jong_idx + HANGUL_BASE


def syllable_to_jaso(syllable: int) -> Tuple[Optional[int], Optional[int], Optional[int]]:
    """
    음절을 초성, 중성, 종성으로 분해한다.
    Args:
        syllable:  음절 코드 값
    Returns:
        (초성, 중성, 종성) tuple. 종성이 없으면 종성은 None, 음절이 아니면 모두 None
    """
    if not is_syllable(syllable):
        return None, None, None

    idx = syllable - HANGUL_BASE
    jong_idx = idx % NUM_JONGSEONG
    idx //= NUM_JONGSEONG
    jung_idx = idx % NUM_JUNGSEONG
    cho_idx = idx // NUM_JUNGSEONG

    jong = JONGSEONG_BASE + jong_idx if jong_idx else None
    return CHOSEONG_BASE + cho_idx, JUNGSEONG_BASE + jung_idx, jong


def is_syllable_boundary(prev: int, curr: int) -> bool:
    """
    두 코드 사이가 음절 경계인 지 여부. 초성 뒤 초성/중성, 중성 뒤 중성/종성,
    종성 뒤 종성만 같은 음절로 이어진다.
    Args:
        prev:  앞 코드
        curr:  뒤 코드
    Returns:
        경계 여부
    """
    if is_choseong(prev):
        return not (is_choseong(curr) or is_jungseong(curr))
    if is_jungseong(prev):
        return not (is_jungseong(curr) or is_jongseong(curr))
    if is_jongseong(prev):
        return not is_jongseong(curr)
    return True


def syllable_len(chars: Sequence[int], max_len: int = -1, start: int = 0) -> int:
    """
    start 위치에서 시작하는 한 음절에 해당하는 코드의 갯수를 구한다.
    L*V*T* 패턴의 자소열을 한 음절로 보기 때문에 "ㅂ ㅂ ㅜ ㅔ ㄹ ㄱ"도 한 음절('쀍')로 판단한다.
    실제로 겹자소로 합칠 수 있는 지는 따지지 않는다.
    자소가 아닌 코드는 항상 1을 반환한다. 자소열 전체의 음절 갯수가 아님에 주의한다.
    Args:
        chars:  코드 값 리스트
        max_len:  읽을 길이의 제한값. 음수이면 끝까지
        start:  시작 위치
    Returns:
        한 음절에 해당하는 코드의 갯수. 읽을 코드가 없거나 0(종료 문자)이면 0
    """
    end = len(chars) if max_len < 0 else min(len(chars), start + max_len)
    if start >= end or chars[start] == 0:
        return 0
    idx = start + 1
    while idx < end:
        if chars[idx] == 0 or is_syllable_boundary(chars[idx-1], chars[idx]):
            break
        idx += 1
    return idx - start


def build_syllable(chars: Sequence[int]) -> Optional[int]:
    """
    한 음절 분량의 자소열을 겹자소로 합친 다음 하나의 음절로 조합한다.
    Args:
        chars:  자소 코드 값 리스트
    Returns:
        음절 코드 값. 합치거나 조합할 수 없으면 None
    """
    cho, jung, jong = None, None, None
    idx = 0
    while idx < len(chars) and is_choseong_conjoinable(chars[idx]):
        cho = choseong_compress(cho, chars[idx])
        if cho is None:
            return None
        idx += 1
    while idx < len(chars) and is_jungseong_conjoinable(chars[idx]):
        jung = jungseong_compress(jung, chars[idx])
        if jung is None:
            return None
        idx += 1
    while idx < len(chars) and is_jongseong_conjoinable(chars[idx]):
        jong = jongseong_compress(jong, chars[idx])
        if jong is None:
            return None
        idx += 1
    if idx < len(chars):
        return None
    if cho is None or jung is None:
        return None
    return jaso_to_syllable(cho, jung, jong)
