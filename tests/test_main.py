# -*- coding: utf-8 -*-
"""
Unit tests for the __main__ module of the photo screensaver.

This module ensures that running the package as a script
(`python -m photo_screensaver`) correctly delegates to the main CLI function.
"""

import runpy

def test_main_entry_point(mocker):
    """
    Test that running the package as a script calls the cli.main function.
    """
    mock_cli_main = mocker.patch('photo_screensaver.cli.main')

    runpy.run_module('photo_screensaver.__main__', run_name='__main__')

    mock_cli_main.assert_called_once()
