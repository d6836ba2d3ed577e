"""
# dcdump: describe a stream one byte at a time.

For each byte of the input a line is printed with

 1. the offset of the byte from the start of the stream
 2. the line number and the column of the byte, as counted by the newlines
    of the input itself
 3. the binary, octal, decimal and hexadecimal value of the byte
 4. the byte itself if printable, the name of the control code otherwise

for example, dumping the three bytes b"A\\n\\x8d" from a file

    0 1 1 : 01000001 : 0101 : 065 : 0x41 : A
    1 1 2 : 00001010 : 0012 : 010 : 0x0A : \\n
    2 2 1 : 10001101 : 0215 : 141 : 0x8D : RI

The width of the first three fields depends on the maximum size of the
input so that all the lines of a run are aligned.
"""
