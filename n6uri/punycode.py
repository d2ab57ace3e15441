# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
*Punycode* (RFC 3492) -- the Bootstring algorithm with the parameters
used for internationalized domain name labels.

The low-level functions, :func:`bootstring_encode` and
:func:`bootstring_decode`, implement the algorithm exactly as it is
specified in RFC 3492 (sec. 6), so their results can be compared with
the sample strings from sec. 7.1 of that RFC:

>>> bootstring_encode('b\xfccher')
'bcher-kva'
>>> bootstring_decode('bcher-kva') == 'b\xfccher'
True
>>> bootstring_encode('-> $1.00 <-')
'-> $1.00 <--'

The label-level functions, :func:`encode` and :func:`decode`, deal
with the ``xn--`` prefix (and leave pure-ASCII labels intact):

>>> encode('b\xfccher')
'xn--bcher-kva'
>>> encode('example')
'example'
>>> decode('xn--bcher-kva') == 'b\xfccher'
True
>>> decode('XN--bcher-kva') == 'b\xfccher'
True
>>> decode('example')
'example'

The domain-level functions, :func:`domain_to_ascii` and
:func:`domain_to_unicode`, apply the former ones to each label:

>>> domain_to_ascii('www.b\xfccher.example')
'www.xn--bcher-kva.example'
>>> domain_to_unicode('www.xn--bcher-kva.example') == 'www.b\xfccher.example'
True

Any failure is signalled with :exc:`n6uri.exceptions.PunycodeError`:

>>> decode('xn--bcher-kv!')         # doctest: +IGNORE_EXCEPTION_DETAIL
Traceback (most recent call last):
  ...
n6uri.exceptions.PunycodeError: ...
"""

from n6uri.encoding_helpers import ascii_str
from n6uri.exceptions import PunycodeError
from n6uri.regexes import ACE_PREFIX_REGEX


#
# Bootstring parameters for Punycode (RFC 3492, sec. 5)
#

BASE = 36
TMIN = 1
TMAX = 26
SKEW = 38
DAMP = 700
INITIAL_BIAS = 72
INITIAL_N = 0x80
DELIMITER = '-'

ACE_PREFIX = 'xn--'
LABEL_SEPARATOR = '.'

# (values greater than that are considered an overflow)
MAXINT = 0x7FFFFFFF

MAX_CODE_POINT = 0x10FFFF



#
# Low-level stuff (the Bootstring algorithm itself)
#

def adapt(delta, num_points, first_time):
    """
    The bias adaptation function (RFC 3492, sec. 6.1).

    >>> adapt(0, 1, True)
    0
    >>> adapt(745, 1, True)
    1
    >>> adapt(98, 2, False)
    23
    """
    delta = delta // DAMP if first_time else delta // 2
    delta += delta // num_points
    k = 0
    while delta > ((BASE - TMIN) * TMAX) // 2:
        delta //= BASE - TMIN
        k += BASE
    return k + (((BASE - TMIN + 1) * delta) // (delta + SKEW))


def bootstring_encode(s):
    """
    Encode the given string with the Bootstring algorithm (RFC 3492,
    sec. 6.3) -- *without* adding the ``xn--`` prefix.

    Raises :exc:`~n6uri.exceptions.PunycodeError` on overflow.
    """
    code_points = [ord(c) for c in s]
    output = [c for c in s if ord(c) < INITIAL_N]
    h = b = len(output)
    if b > 0:
        output.append(DELIMITER)
    n = INITIAL_N
    delta = 0
    bias = INITIAL_BIAS
    while h < len(code_points):
        m = min(cp for cp in code_points if cp >= n)
        if m - n > (MAXINT - delta) // (h + 1):
            raise PunycodeError('overflow when encoding {!a}'.format(s))
        delta += (m - n) * (h + 1)
        n = m
        for cp in code_points:
            if cp < n:
                delta += 1
                if delta > MAXINT:
                    raise PunycodeError('overflow when encoding {!a}'.format(s))
            elif cp == n:
                q = delta
                k = BASE
                while True:
                    t = _threshold(k, bias)
                    if q < t:
                        break
                    output.append(_encode_digit(t + (q - t) % (BASE - t)))
                    q = (q - t) // (BASE - t)
                    k += BASE
                output.append(_encode_digit(q))
                bias = adapt(delta, h + 1, h == b)
                delta = 0
                h += 1
        delta += 1
        n += 1
    return ''.join(output)


def bootstring_decode(s):
    """
    Decode the given string with the Bootstring algorithm (RFC 3492,
    sec. 6.2) -- the ``xn--`` prefix, if any, should already be removed.

    Raises :exc:`~n6uri.exceptions.PunycodeError` if the input contains
    a non-basic code point or an invalid digit, if it ends prematurely,
    or on overflow.

    >>> bootstring_decode('tda') == '\xfc'
    True
    >>> bootstring_decode('tda\\xfc')         # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    n6uri.exceptions.PunycodeError: ...
    >>> bootstring_decode('bcher-kv')       # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    n6uri.exceptions.PunycodeError: ...
    """
    if any(ord(c) >= INITIAL_N for c in s):
        raise PunycodeError('{} contains non-basic code point(s)'.format(ascii(s)))
    basic_len = s.rfind(DELIMITER)
    if basic_len < 0:
        basic_len = 0
    output = list(s[:basic_len])
    pos = basic_len + 1 if basic_len > 0 else 0
    n = INITIAL_N
    i = 0
    bias = INITIAL_BIAS
    while pos < len(s):
        old_i = i
        w = 1
        k = BASE
        while True:
            if pos >= len(s):
                raise PunycodeError('premature end of input {!a}'.format(s))
            digit = _decode_digit(s[pos])
            pos += 1
            if digit is None:
                raise PunycodeError('invalid digit {!a} in {!a}'.format(s[pos - 1], s))
            if digit > (MAXINT - i) // w:
                raise PunycodeError('overflow when decoding {!a}'.format(s))
            i += digit * w
            t = _threshold(k, bias)
            if digit < t:
                break
            if w > MAXINT // (BASE - t):
                raise PunycodeError('overflow when decoding {!a}'.format(s))
            w *= BASE - t
            k += BASE
        out_len = len(output) + 1
        bias = adapt(i - old_i, out_len, old_i == 0)
        if i // out_len > MAXINT - n:
            raise PunycodeError('overflow when decoding {!a}'.format(s))
        n += i // out_len
        i %= out_len
        if n > MAX_CODE_POINT:
            raise PunycodeError('code point out of range when decoding {!a}'.format(s))
        output.insert(i, chr(n))
        i += 1
    return ''.join(output)


def _threshold(k, bias):
    if k <= bias:
        return TMIN
    if k >= bias + TMAX:
        return TMAX
    return k - bias


def _encode_digit(d):
    # 0..25 -> 'a'..'z', 26..35 -> '0'..'9'
    return chr(d + 22 + (75 if d < 26 else 0))


def _decode_digit(c):
    cp = ord(c)
    if 0x30 <= cp <= 0x39:
        return cp - 22
    if 0x41 <= cp <= 0x5A:
        return cp - 0x41
    if 0x61 <= cp <= 0x7A:
        return cp - 0x61
    return None



#
# Label-level and domain-level stuff
#

def encode(label):
    """
    Convert the given domain name label to its ASCII (ACE) form.

    Pure ASCII labels are returned intact; other labels are encoded
    with :func:`bootstring_encode` and prefixed with ``xn--``.
    """
    if label.isascii():
        return label
    return ACE_PREFIX + bootstring_encode(label)


def decode(label):
    """
    Convert the given ASCII (ACE) domain name label to its Unicode form.

    Labels prefixed with ``xn--`` (case-insensitively) are decoded
    with :func:`bootstring_decode`; other ASCII labels are returned
    intact.  A label that contains non-ASCII characters is rejected
    (it is not in the ACE form).
    """
    if not label.isascii():
        raise PunycodeError('{} is not an ASCII label'.format(ascii_str(label)))
    if ACE_PREFIX_REGEX.search(label):
        return bootstring_decode(label[len(ACE_PREFIX):])
    return label


def domain_to_ascii(domain):
    """
    Apply :func:`encode` to each label of the given domain name.

    >>> domain_to_ascii('пример.example')
    'xn--e1afmkfd.example'
    """
    return LABEL_SEPARATOR.join(map(encode, domain.split(LABEL_SEPARATOR)))


def domain_to_unicode(domain):
    """
    Apply :func:`decode` to each label of the given domain name.

    >>> domain_to_unicode('xn--e1afmkfd.example') == (
    ...     'пример.example')
    True
    """
    return LABEL_SEPARATOR.join(map(decode, domain.split(LABEL_SEPARATOR)))
