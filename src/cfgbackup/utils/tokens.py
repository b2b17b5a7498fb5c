#!/usr/bin/env python3
"""
Random token and binary encoding helpers

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""

import base64
import secrets
import struct

U32_MAX = 2 ** 32 - 1


def generate_token(length: int = 64) -> str:
    """Return a random base64 string of the given length"""
    if length <= 0:
        raise ValueError("Token length must be positive")
    raw = secrets.token_bytes(length * 3 // 4 + 1)
    return base64.b64encode(raw).decode('ascii')[:length]


def u32le(n: int) -> bytes:
    """Encode an unsigned 32-bit integer as 4 little-endian bytes"""
    if not 0 <= n <= U32_MAX:
        raise ValueError(f"{n} is outside the unsigned 32-bit range 0..{U32_MAX}")
    return struct.pack("<I", n)
