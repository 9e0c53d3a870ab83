"""
Shared fixtures that build synthetic table (.dbf) and index (.cdx) files.
"""
import struct

import pytest


def encode_descriptor(name, type_code, length, decimal_count=0):
    """Build one 32-byte field descriptor slot."""
    slot = bytearray(32)
    raw_name = name.encode("utf-8")[:11] if isinstance(name, str) else name[:11]
    slot[0:len(raw_name)] = raw_name
    slot[11] = ord(type_code)
    slot[16] = length
    slot[17] = decimal_count
    return bytes(slot)


def encode_table(fields, records=(), record_count=None, header_length=None,
                 truncate=0, deleted=()):
    """
    Build the bytes of a table file.

    Args:
        fields: (name, type_code, length, decimal_count) tuples, names may be ""
        records: sequences of raw column texts, one per named field slot
        record_count: overrides the count written in the header
        header_length: overrides the header length written in the header
        truncate: number of bytes to cut off the end of the file
        deleted: indices of records whose status flag is '*'
    """
    descriptors = b"".join(encode_descriptor(*field) for field in fields)
    if header_length is None:
        header_length = 32 + len(descriptors) + 1
    record_length = 1 + sum(field[2] for field in fields)
    if record_count is None:
        record_count = len(records)

    prefix = bytearray(32)
    prefix[0] = 0x03
    struct.pack_into('<I', prefix, 4, record_count)
    struct.pack_into('<H', prefix, 8, header_length)
    struct.pack_into('<H', prefix, 10, record_length)

    header = bytes(prefix) + descriptors
    header = header.ljust(header_length, b"\r")[:max(header_length, 32)]

    body = b""
    for index, values in enumerate(records):
        row = b"*" if index in deleted else b" "
        for field, value in zip(fields, values):
            raw = value.encode("utf-8") if isinstance(value, str) else value
            row += raw.ljust(field[2], b" ")[:field[2]]
        body += row

    data = header + body + b"\x1a"
    if truncate:
        data = data[:-truncate]
    return data


def encode_index(entries, entry_count=None):
    """
    Build the bytes of a compound index file.

    Args:
        entries: (name, expression) tuples
        entry_count: overrides the count written in the header
    """
    header = bytearray(512)
    struct.pack_into('<H', header, 4, len(entries) if entry_count is None else entry_count)

    data = bytes(header)
    for name, expression in entries:
        slot = bytearray(512)
        raw_name = name.encode("utf-8")[:11]
        raw_expression = expression.encode("utf-8")[:209]
        slot[0:11] = raw_name.ljust(11, b" ")
        slot[11:11 + 209] = raw_expression.ljust(209, b" ")
        data += bytes(slot)
    return data


@pytest.fixture
def table_bytes():
    """Factory fixture returning encode_table."""
    return encode_table


@pytest.fixture
def index_bytes():
    """Factory fixture returning encode_index."""
    return encode_index


@pytest.fixture
def descriptor_bytes():
    """Factory fixture returning encode_descriptor."""
    return encode_descriptor


@pytest.fixture
def shop_dir(tmp_path, table_bytes):
    """A directory named 'shop' holding a single 'items' table with one row."""
    directory = tmp_path / "shop"
    directory.mkdir()
    (directory / "items.dbf").write_bytes(table_bytes(
        [("id", "N", 5, 0), ("name", "C", 20, 0)],
        [("    7", "Pen")],
    ))
    return directory
