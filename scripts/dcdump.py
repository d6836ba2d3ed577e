#!/usr/bin/env python3
'''
Print a line for each byte of a file

 $ printf 'A\n' | dcdump.py
 0000000000000000000 0000000000000000001 0000000000000000001 : 01000001 : 0101 : 065 : 0x41 : A
 0000000000000000001 0000000000000000001 0000000000000000002 : 00001010 : 0012 : 010 : 0x0A : \n
'''
import sys

from dcdump.cli import main


if __name__ == '__main__':
    sys.exit(main())
