import ports
import pytest

from ports import decode
from ports.errors import DecodeError


def test_primitives():

    assert decode.string('hello') == 'hello'
    assert decode.integer(42) == 42
    assert decode.number(35.5) == 35.5
    assert decode.number(3) == 3
    assert decode.boolean(False) is False
    assert decode.null(None) is None
    assert decode.anything([1, 2]) == [1, 2]

    failures = (
        (decode.string, 42),
        (decode.string, None),
        (decode.integer, 'hello'),
        (decode.integer, True),
        (decode.integer, 35.5),
        (decode.number, '35.5'),
        (decode.number, False),
        (decode.boolean, 0),
        (decode.null, 0),
    )

    for decoder, data in failures:
        with pytest.raises(DecodeError):
            decoder(data)


def test_combinators():

    point = decode.record(x=decode.number, y=decode.number)
    assert point({'x': 1, 'y': 2.5, 'z': 'ignored'}) == {'x': 1, 'y': 2.5}

    with pytest.raises(DecodeError, match="missing field 'y'"):
        point({'x': 1})

    with pytest.raises(DecodeError, match="field 'x'"):
        point({'x': 'one', 'y': 2})

    names = decode.list_of(decode.string)
    assert names(['a', 'b']) == ['a', 'b']
    assert names([]) == []

    with pytest.raises(DecodeError, match='element 1'):
        names(['a', 2])

    with pytest.raises(DecodeError):
        names('a')

    maybe = decode.optional(decode.integer)
    assert maybe(None) is None
    assert maybe(3) == 3

    either = decode.one_of(decode.integer, decode.string)
    assert either(3) == 3
    assert either('three') == 'three'

    with pytest.raises(DecodeError, match='no alternative'):
        either(None)

    with pytest.raises(ValueError):
        decode.one_of()


def test_apply():

    class Greeting:
        def __init__(self, text):
            self.text = text

    greeting = decode.apply(Greeting, decode.field('text', decode.string))
    result = greeting({'text': 'hello'})

    assert isinstance(result, Greeting)
    assert result.text == 'hello'

    with pytest.raises(DecodeError):
        greeting({'text': 3})


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
