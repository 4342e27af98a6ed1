#!/usr/bin/env python3
# -*- coding: utf-8 -*-


"""
khangul command line program tests
__author__ = 'Jamie (jamie.lim@kakaocorp.com)'
__copyright__ = 'Copyright (C) 2019-, Kakao Corp. All rights reserved.'
"""


###########
# imports #
###########
from argparse import Namespace
import io
import unittest
from unittest import mock

import khangul
from khangul import KhangulExcept, Options
from khangul.khangul import main, make_converter, run


#########
# tests #
#########
def _str(*codes: int) -> str:
    """
    make string from code values
    """
    return ''.join([chr(c) for c in codes])


class TestOptions(unittest.TestCase):
    """
    option string tests
    """
    def test_default(self):
        """
        empty option string gives default options
        """
        self.assertFalse(Options.parse('').compat_leftover)
        self.assertFalse(Options.parse('{}').compat_leftover)

    def test_parse(self):
        """
        test Options.parse()
        """
        try:
            opts = Options.parse('{"compat_leftover": true}')
            self.assertTrue(opts.compat_leftover)
        except KhangulExcept as khangul_exc:
            self.fail(khangul_exc)

    def test_invalid(self):
        """
        invalid option strings
        """
        with self.assertRaises(KhangulExcept):
            Options.parse('invalid option')
        with self.assertRaises(KhangulExcept):
            Options.parse('[1, 2]')
        with self.assertRaises(KhangulExcept):
            Options.parse('{"not_existing_option": true}')
        with self.assertRaises(KhangulExcept):
            Options.parse('{"compat_leftover": 1}')
        with self.assertRaises(KhangulExcept):
            Options.parse('{"__class__": true}')
        with self.assertRaises(KhangulExcept):
            Options.parse('{"__dict__": true}')
        with self.assertRaises(KhangulExcept):
            Options.parse('{"parse": true}')


class TestRun(unittest.TestCase):
    """
    command line program tests
    """
    def test_make_converter(self):
        """
        test make_converter()
        """
        opts = Options()
        jamos = _str(0x1100, 0x1161, 0x11a8)
        self.assertEqual(make_converter('compose', opts)(jamos), _str(0xac01))
        self.assertEqual(make_converter('decompose', opts)(_str(0xac01)), jamos)
        self.assertEqual(make_converter('compat', opts)(jamos), _str(0x3131, 0x314f, 0x3131))
        self.assertEqual(make_converter('split', opts)(_str(0xac01)),
                         _str(0x3131, 0x314f, 0x3131))
        with self.assertRaises(KhangulExcept):
            make_converter('not_existing_mode', opts)

    def _run(self, mode: str, text: str, opt_str: str = '', input_path: str = '') -> str:
        """
        run program with stdin/stdout replaced
        """
        args = Namespace(mode=mode, opt_str=opt_str, input=input_path)
        stdout = io.StringIO()
        with mock.patch('sys.stdin', io.StringIO(text)), mock.patch('sys.stdout', stdout):
            run(args)
        return stdout.getvalue()

    def test_compose(self):
        """
        compose mode
        """
        text = _str(0x1100, 0x1161, 0x0a, 0x11a8, 0x1102, 0x1161, 0x0a)
        self.assertEqual(self._run('compose', text), _str(0xac00, 0x0a, 0x11a8, 0xb098, 0x0a))
        self.assertEqual(self._run('compose', text, '{"compat_leftover": true}'),
                         _str(0xac00, 0x0a, 0x3131, 0xb098, 0x0a))

    def test_input_file(self):
        """
        lines are read at once when input file is given
        """
        text = _str(0xac01, 0x0d, 0x0a, 0xb098, 0x0a)
        self.assertEqual(self._run('split', text, input_path='corpus.txt'),
                         _str(0x3131, 0x314f, 0x3131, 0x0a, 0x3134, 0x314f, 0x0a))

    def test_invalid_option(self):
        """
        invalid option string raises exception
        """
        with self.assertRaises(KhangulExcept):
            self._run('compose', 'abc\n', 'invalid option')

    def test_main_invalid_option(self):
        """
        main() logs invalid option string and exits with status 1
        """
        argv = ['khangul', '--opt-str', '{"__class__": true}']
        with mock.patch('sys.argv', argv), mock.patch('sys.stdin', io.StringIO('abc\n')):
            with self.assertLogs('khangul.khangul', level='ERROR'):
                with self.assertRaises(SystemExit) as exit_ctx:
                    main()
        self.assertEqual(exit_ctx.exception.code, 1)

    def test_package_api(self):
        """
        public names are exported from the package
        """
        self.assertEqual(khangul.jaso_to_syllable(0x1100, 0x1161), 0xac00)
        self.assertEqual(khangul.jamos_to_syllables([0x1100, 0x1161]), [0xac00, ])
        self.assertEqual(khangul.syllable_len([0x3131, 0x1161], 2), 1)


########
# main #
########
if __name__ == '__main__':
    unittest.main()
