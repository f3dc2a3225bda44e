"""Locating the end of the header block in an HTTP response."""

from __future__ import annotations

from typing import Union

Response = Union[str, bytes, bytearray, memoryview]


def find_body(response: Response) -> str | bytes | None:
    """Return the response from the blank line that ends the headers.

    The result starts with the ``CRLF CRLF`` separator itself. Returns
    ``None`` when the response holds no such separator.
    """
    if isinstance(response, str):
        index = response.find("\r\n\r\n")
        return None if index < 0 else response[index:]
    data = bytes(response)
    index = data.find(b"\r\n\r\n")
    return None if index < 0 else data[index:]