# -*- coding: utf-8 -*-


"""
같은 종류의 자소 두 개를 하나의 겹자소(쌍자음, 이중모음, 겹받침)로 합치는 모듈
__author__ = 'Jamie (jamie.lim@kakaocorp.com)'
__copyright__ = 'Copyright (C) 2019-, Kakao Corp. All rights reserved.'
"""


###########
# imports #
###########
from typing import Dict, Optional, Tuple


#############
# constants #
#############
# (앞 자소, 뒤 자소) => 합쳐진 자소
_CHOSEONG_CLUSTER = {
    (0x1100, 0x1100): 0x1101,    # ㄱ + ㄱ = ㄲ
    (0x1103, 0x1103): 0x1104,    # ㄷ + ㄷ = ㄸ
    (0x1107, 0x1107): 0x1108,    # ㅂ + ㅂ = ㅃ
    (0x1109, 0x1109): 0x110a,    # ㅅ + ㅅ = ㅆ
    (0x110c, 0x110c): 0x110d,    # ㅈ + ㅈ = ㅉ
}

_JUNGSEONG_CLUSTER = {
    (0x1169, 0x1161): 0x116a,    # ㅗ + ㅏ = ㅘ
    (0x1169, 0x1162): 0x116b,    # ㅗ + ㅐ = ㅙ
    (0x1169, 0x1175): 0x116c,    # ㅗ + ㅣ = ㅚ
    (0x116e, 0x1165): 0x116f,    # ㅜ + ㅓ = ㅝ
    (0x116e, 0x1166): 0x1170,    # ㅜ + ㅔ = ㅞ
    (0x116e, 0x1175): 0x1171,    # ㅜ + ㅣ = ㅟ
    (0x1173, 0x1175): 0x1174,    # ㅡ + ㅣ = ㅢ
    (0x1161, 0x1175): 0x1162,    # ㅏ + ㅣ = ㅐ
    (0x1163, 0x1175): 0x1164,    # ㅑ + ㅣ = ㅒ
    (0x1165, 0x1175): 0x1166,    # ㅓ + ㅣ = ㅔ
    (0x1167, 0x1175): 0x1168,    # ㅕ + ㅣ = ㅖ
}

_JONGSEONG_CLUSTER = {
    (0x11a8, 0x11a8): 0x11a9,    # ㄱ + ㄱ = ㄲ
    (0x11a8, 0x11ba): 0x11aa,    # ㄱ + ㅅ = ㄳ
    (0x11ab, 0x11b0): 0x11ab,    # ㄴ + ㄺ = ㄴ
    (0x11ab, 0x11c2): 0x11ad,    # ㄴ + ㅎ = ㄶ
    (0x11af, 0x11a8): 0x11b0,    # ㄹ + ㄱ = ㄺ
    (0x11af, 0x11b7): 0x11b1,    # ㄹ + ㅁ = ㄻ
    (0x11af, 0x11b8): 0x11b2,    # ㄹ + ㅂ = ㄼ
    (0x11af, 0x11ba): 0x11b3,    # ㄹ + ㅅ = ㄽ
    (0x11af, 0x11c0): 0x11b4,    # ㄹ + ㅌ = ㄾ
    (0x11af, 0x11c1): 0x11b5,    # ㄹ + ㅍ = ㄿ
    (0x11af, 0x11c2): 0x11b6,    # ㄹ + ㅎ = ㅀ
    (0x11b8, 0x11ba): 0x11b9,    # ㅂ + ㅅ = ㅄ
    (0x11ba, 0x11ba): 0x11bb,    # ㅅ + ㅅ = ㅆ
}


#############
# functions #
#############
def _compress(table: Dict[Tuple[int, int], int], acc: Optional[int], char: int) \
        -> Optional[int]:
    """
    누적된 자소에 다음 자소를 합친다.
    Args:
        table:  겹자소 테이블
        acc:  지금까지 합쳐진 자소. 처음이면 None(또는 0)
        char:  다음 자소
    Returns:
        합쳐진 자소. 합칠 수 없으면 None
    """
    if not acc:
        return char
    return table.get((acc, char))


def choseong_compress(acc: Optional[int], char: int) -> Optional[int]:
    """
    초성 두 개를 쌍자음 초성으로 합친다.
    """
    return _compress(_CHOSEONG_CLUSTER, acc, char)


def jungseong_compress(acc: Optional[int], char: int) -> Optional[int]:
    """
    중성 두 개를 이중모음 중성으로 합친다.
    """
    return _compress(_JUNGSEONG_CLUSTER, acc, char)


def jongseong_compress(acc: Optional[int], char: int) -> Optional[int]:
    """
    종성 두 개를 겹받침 종성으로 합친다.
    """
    return _compress(_JONGSEONG_CLUSTER, acc, char)
