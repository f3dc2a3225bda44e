from oauthcred.httpbody import find_body


def test_finds_separator_in_bytes():
    response = b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\n\r\nhello"
    assert find_body(response) == b"\r\n\r\nhello"


def test_finds_separator_in_str():
    response = "HTTP/1.1 200 OK\r\n\r\n{}"
    assert find_body(response) == "\r\n\r\n{}"


def test_missing_separator_returns_none():
    assert find_body(b"HTTP/1.1 200 OK\r\nA: b\r\n") is None


def test_first_separator_wins():
    response = b"H\r\n\r\nbody\r\n\r\nmore"
    body = find_body(response)
    assert body == response[1:]


def test_result_is_suffix_of_input():
    response = bytearray(b"X: y\r\n\r\nz")
    body = find_body(response)
    assert bytes(response).endswith(body)
    assert body.startswith(b"\r\n\r\n")