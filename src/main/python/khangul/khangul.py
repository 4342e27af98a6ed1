#!/usr/bin/env python3
# -*- coding: utf-8 -*-


"""
khangul command line program
한 줄씩 읽어서 자소열을 음절로 조합하거나 음절을 자소로 분해한다.
__author__ = 'Jamie (jamie.lim@kakaocorp.com)'
__copyright__ = 'Copyright (C) 2019-, Kakao Corp. All rights reserved.'
"""


###########
# imports #
###########
from argparse import ArgumentParser, Namespace
import json
import logging
import os
import sys
from typing import Callable

from tqdm import tqdm

from khangul.convert import compose_text, decompose_compat, decompose_text
from khangul.resource.jaso import norm_compat


#############
# constants #
#############
MODES = ['compose', 'decompose', 'compat', 'split']


#############
# variables #
#############
_LOG = logging.getLogger(__name__)


#########
# types #
#########
class KhangulExcept(Exception):
    """
    khangul을 위한 표준 예외 클래스
    """


class Options:    # pylint: disable=too-few-public-methods
    """
    변환 옵션
    """
    def __init__(self, compat_leftover: bool = False):
        """
        Args:
            compat_leftover:  조합하지 못한 자소를 호환 자모로 출력할 지 여부
        """
        self.compat_leftover = compat_leftover

    def __str__(self):
        return json.dumps(vars(self), sort_keys=True)

    @classmethod
    def parse(cls, opt_str: str = '') -> 'Options':
        """
        옵션 문자열로부터 옵션 객체를 생성한다.
        Args:
            opt_str:  옵션 문자열 (JSON 포맷)
        Returns:
            옵션 객체
        """
        opts = cls()
        if not opt_str:
            return opts
        try:
            opt_dic = json.loads(opt_str)
        except ValueError as val_err:
            raise KhangulExcept('invalid option string: {}: {}'.format(opt_str, val_err))
        if not isinstance(opt_dic, dict):
            raise KhangulExcept('option string is not a JSON object: {}'.format(opt_str))
        for key, val in opt_dic.items():
            if key not in vars(opts):
                raise KhangulExcept('unknown option: {}'.format(key))
            if not isinstance(val, bool):
                raise KhangulExcept('option value must be boolean: {}: {}'.format(key, val))
            setattr(opts, key, val)
        return opts


#############
# functions #
#############
def make_converter(mode: str, opts: Options) -> Callable[[str], str]:
    """
    변환 모드에 해당하는 변환 함수를 얻는다.
    Args:
        mode:  변환 모드 (compose, decompose, compat, split)
        opts:  변환 옵션
    Returns:
        텍스트를 받아 변환된 텍스트를 반환하는 함수
    """
    if mode == 'compose':
        return lambda text: compose_text(text, opts.compat_leftover)
    if mode == 'decompose':
        return decompose_text
    if mode == 'compat':
        return norm_compat
    if mode == 'split':
        return decompose_compat
    raise KhangulExcept('unknown mode: {}'.format(mode))


def run(args: Namespace):
    """
    run function which is the start point of program
    Args:
        args:  program arguments
    """
    opts = Options.parse(args.opt_str)
    _LOG.debug('mode: %s, options: %s', args.mode, opts)
    convert = make_converter(args.mode, opts)

    lines = sys.stdin
    if args.input:
        lines = sys.stdin.readlines()
        lines = tqdm(lines, os.path.basename(args.input), len(lines), mininterval=1, ncols=100)
    line_cnt = 0
    in_cnt = 0
    out_cnt = 0
    for line in lines:
        line = line.rstrip('\r\n')
        converted = convert(line)
        print(converted)
        line_cnt += 1
        in_cnt += len(line)
        out_cnt += len(converted)
    _LOG.info('%s: %d lines, %d => %d characters', args.mode, line_cnt, in_cnt, out_cnt)


########
# main #
########
def main():
    """
    main function processes only argument parsing
    """
    parser = ArgumentParser(description='Hangul jaso/syllable converter')
    parser.add_argument('-m', '--mode', help='conversion mode <default: compose>',
                        choices=MODES, default='compose')
    parser.add_argument('--opt-str', help='option string (JSON format)', metavar='JSON',
                        default='')
    parser.add_argument('--input', help='input file <default: stdin>', metavar='FILE')
    parser.add_argument('--output', help='output file <default: stdout>', metavar='FILE')
    parser.add_argument('--debug', help='enable debug', action='store_true')
    args = parser.parse_args()

    if args.input:
        sys.stdin = open(args.input, 'r', encoding='UTF-8')
    if args.output:
        sys.stdout = open(args.output, 'w', encoding='UTF-8')
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    try:
        run(args)
    except KhangulExcept as khangul_exc:
        _LOG.error(khangul_exc)
        sys.exit(1)


if __name__ == '__main__':
    main()
