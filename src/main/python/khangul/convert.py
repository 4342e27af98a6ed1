# -*- coding: utf-8 -*-


"""
자소열을 음절열로 변환(조합)하고 음절열을 자소열로 분해하는 모듈
__author__ = 'Jamie (jamie.lim@kakaocorp.com)'
__copyright__ = 'Copyright (C) 2019-, Kakao Corp. All rights reserved.'
"""


###########
# imports #
###########
import logging
from typing import Iterator, List, NamedTuple, Optional, Sequence

from khangul.resource.jaso import is_jaso, is_syllable, jaso_to_jamo
from khangul.syllable import build_syllable, syllable_len, syllable_to_jaso


#############
# variables #
#############
_LOG = logging.getLogger(__name__)


#########
# types #
#########
class Span(NamedTuple):
    """
    한 음절로 판단된 구간. [begin, end) 위치의 코드가 syllable 하나로 조합된다.
    조합에 실패한 구간은 syllable이 None이고 원래 코드를 그대로 출력한다.
    """
    begin: int
    end: int
    syllable: Optional[int]


#############
# functions #
#############
def _src_len(src: Sequence[int], src_len: int) -> int:
    """
    실제로 읽을 입력의 길이
    Args:
        src:  입력 코드 값 리스트
        src_len:  입력 길이. 음수이면 0(종료 문자) 앞까지
    Returns:
        입력 길이
    """
    if src_len >= 0:
        return min(src_len, len(src))
    length = 0
    while length < len(src) and src[length] != 0:
        length += 1
    return length


def iter_syllables(src: Sequence[int], src_len: int = -1) -> Iterator[Span]:
    """
    입력 자소열을 음절 단위 구간으로 나누고 각 구간의 조합 결과를 생성한다.
    마지막으로 생성한 구간의 end가 소비한 입력의 길이가 된다.
    Args:
        src:  입력 코드 값 리스트
        src_len:  입력 길이. 음수이면 0(종료 문자) 앞까지
    Yields:
        Span 객체
    """
    src_len = _src_len(src, src_len)
    begin = 0
    length = syllable_len(src, src_len, begin)
    while length > 0:
        end = begin + length
        syllable = build_syllable(src[begin:end])
        if syllable is None and is_jaso(src[begin]) and _LOG.isEnabledFor(logging.DEBUG):
            _LOG.debug('fail to build syllable: %s',
                       ' '.join(['U+{:04X}'.format(c) for c in src[begin:end]]))
        yield Span(begin, end, syllable)
        begin = end
        length = syllable_len(src, src_len - begin, begin)


def jamos_to_syllables_into(dest: List[int], dest_len: int, src: Sequence[int],
                            src_len: int = -1) -> int:
    """
    자소열을 음절열로 변환하여 dest에 저장한다.
    src_len 만큼 읽고 dest_len 이상 쓰지 않는다. 조합할 수 없는 구간은 그대로 복사한다.
    종료 문자를 dest에 덧붙이지 않는다.
    Args:
        dest:  결과를 저장할 리스트 (앞에서부터 덮어쓰고 모자라면 늘린다)
        dest_len:  결과를 저장할 최대 길이
        src:  입력 코드 값 리스트
        src_len:  입력 길이. 음수이면 0(종료 문자) 앞까지
    Returns:
        dest에 저장한 코드의 갯수
    """
    written = 0
    for span in iter_syllables(src, src_len):
        if written >= dest_len:
            break
        if span.syllable is not None:
            chunk = [span.syllable, ]
        else:
            chunk = list(src[span.begin:span.end])[:dest_len - written]
        dest[written:written + len(chunk)] = chunk
        written += len(chunk)
    return written


def jamos_to_syllables(src: Sequence[int], src_len: int = -1,
                       dest_len: Optional[int] = None) -> List[int]:
    """
    자소열을 음절열로 변환한다.
    Args:
        src:  입력 코드 값 리스트
        src_len:  입력 길이. 음수이면 0(종료 문자) 앞까지
        dest_len:  결과의 최대 길이. None이면 제한 없음
    Returns:
        변환된 코드 값 리스트
    """
    if dest_len is None:
        dest_len = len(src)
    dest = []
    jamos_to_syllables_into(dest, dest_len, src, src_len)
    return dest


def compose_text(text: str, compat_leftover: bool = False) -> str:
    """
    텍스트 내의 자소열을 음절로 조합한다. 자소가 아닌 문자는 그대로 둔다.
    Args:
        text:  입력 텍스트
        compat_leftover:  조합하지 못한 자소를 호환 자모로 바꿀 지 여부
    Returns:
        조합된 텍스트
    """
    if not text:
        return text

    composed = []
    for piece in text.split('\0'):
        codes = [ord(c) for c in piece]
        for span in iter_syllables(codes, len(codes)):
            if span.syllable is not None:
                composed.append(chr(span.syllable))
            elif compat_leftover:
                composed.extend([chr(jaso_to_jamo(c)) for c in codes[span.begin:span.end]])
            else:
                composed.append(piece[span.begin:span.end])
        composed.append('\0')
    return ''.join(composed[:-1])


def decompose_text(text: str) -> str:
    """
    텍스트 내의 음절을 (조합형) 자소로 분해한다. compose_text()의 역변환이다.
    Args:
        text:  입력 텍스트
    Returns:
        자소 분해된 텍스트
    """
    if not text:
        return text

    decomposed = []
    for char in text:
        code = ord(char)
        if not is_syllable(code):
            decomposed.append(char)
            continue
        decomposed.extend([chr(c) for c in syllable_to_jaso(code) if c])
    return ''.join(decomposed)


def decompose_compat(text: str) -> str:
    """
    유니코드 한글 텍스트를 한글 호환영역 자소로 분해한다.
    Args:
        text:  한글 텍스트
    Returns:
        자소 분해된 텍스트
    """
    if not text:
        return text

    decomposed = []
    for char in text:
        code = ord(char)
        if not is_syllable(code):
            decomposed.append(char)
            continue
        decomposed.extend([chr(jaso_to_jamo(c)) for c in syllable_to_jaso(code) if c])
    return ''.join(decomposed)
