#!/usr/bin/env python3
# -*- coding: UTF-8 -*-
from znn_abi.cli import abi_tool

if __name__ == "__main__":
    abi_tool._parse_cli_args()
