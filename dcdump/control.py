'''
Names for the non printable bytes.

See <https://en.wikipedia.org/wiki/List_of_Unicode_characters#Control_codes>.
'''

UNKNOWN = '????'

C0_NAMES = (
    'NUL',  # 0
    'SOH',  # 1
    'STX',  # 2
    'ETX',  # 3
    'EOT',  # 4
    'ENQ',  # 5
    'ACK',  # 6
    'BEL',  # 7
    'BS',   # 8
    '\\t',  # 9
    '\\n',  # 10
    'VT',   # 11
    'FF',   # 12
    '\\r',  # 13
    'SO',   # 14
    'SI',   # 15
    'DLE',  # 16
    'DC1',  # 17
    'DC2',  # 18
    'DC3',  # 19
    'DC4',  # 20
    'NAK',  # 21
    'SYN',  # 22
    'ETB',  # 23
    'CAN',  # 24
    'EM',   # 25
    'SUB',  # 26
    'ESC',  # 27
    'FS',   # 28
    'GS',   # 29
    'RS',   # 30
    'US',   # 31
)

# the C1 block starts at 128 but DEL is handled together with it
C1_START = 0x7f
C1_NAMES = (
    'DEL',   # 127
    'PAD',   # 128
    'HOP',   # 129
    'BPH',   # 130
    'NBH',   # 131
    'IND',   # 132
    'NEL',   # 133
    'SSA',   # 134
    'ESA',   # 135
    'HTS',   # 136
    'HTJ',   # 137
    'VTS',   # 138
    'PLD',   # 139
    'PLU',   # 140
    'RI',    # 141
    'SS2',   # 142
    'SS3',   # 143
    'DCS',   # 144
    'PU1',   # 145
    'PU2',   # 146
    'STS',   # 147
    'CCH',   # 148
    'MW',    # 149
    'SPA',   # 150
    'EPA',   # 151
    'SOS',   # 152
    'SGCI',  # 153
    'SCI',   # 154
    'CSI',   # 155
    'ST',    # 156
    'OSC',   # 157
    'PM',    # 158
    'APC',   # 159
)
C1_END = C1_START + len(C1_NAMES) - 1


def is_printable(byte: int) -> bool:
    '''Like isprint() in the C locale.'''
    return 0x20 <= byte <= 0x7e


def is_control(byte: int) -> bool:
    return 0 <= byte < len(C0_NAMES) or C1_START <= byte <= C1_END


def name_for_control_code(byte: int) -> str:
    if 0 <= byte < len(C0_NAMES):
        return C0_NAMES[byte]

    if C1_START <= byte <= C1_END:
        return C1_NAMES[byte - C1_START]

    return UNKNOWN
