import ports
import pytest


def test_encode_and_decode():

    input_dictionary = dict()
    input_dictionary['list'] = [1, 2, 3, 'a', 'b', None, 'c', 'z']
    input_dictionary['dict'] = {'one': 1, 'two': 2}
    input_dictionary['none'] = None
    input_dictionary['true'] = True
    input_dictionary['false'] = False
    input_dictionary['float'] = 35.5

    encoded = ports.json.dumps(input_dictionary)
    assert isinstance(encoded, bytes)

    # It won't do to compare the encoded JSON against a pre-set notion of
    # what the encoded output should look like; only the decoded value
    # is meaningful.

    decoded = ports.json.loads(encoded)
    assert isinstance(decoded, dict)
    assert decoded == input_dictionary


def test_decode_error():

    with pytest.raises(ports.json.Error):
        ports.json.loads(b'{"tag": ')


def test_wide_integers():

    limit = 2 ** 63 - 1
    assert ports.json.loads(str(limit).encode()) == limit

    # Past 64 bits the value survives only as an approximation.

    decoded = ports.json.loads(b'123456789012345678901234567890')
    assert isinstance(decoded, float)
    assert decoded == pytest.approx(1.2345678901234568e+29)

    with pytest.raises(TypeError):
        ports.json.dumps(123456789012345678901234567890)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
