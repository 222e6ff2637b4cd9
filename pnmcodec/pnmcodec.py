# pnmcodec.py

# Copyright (c) 2011-2023, Christoph Gohlke
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# 1. Redistributions of source code must retain the above copyright notice,
#    this list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright notice,
#    this list of conditions and the following disclaimer in the documentation
#    and/or other materials provided with the distribution.
#
# 3. Neither the name of the copyright holder nor the names of its
#    contributors may be used to endorse or promote products derived from
#    this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

"""Strict stream codec for Netpbm images.

Pnmcodec is a Python library to decode and encode image streams in the
Netpbm family of formats:

- PBM (Portable Bit Map): P1 (text) and P4 (binary)
- PGM (Portable Gray Map): P2 (text) and P5 (binary), 8 and 16-bit
- PPM (Portable Pixel Map): P3 (text) and P6 (binary), 8 and 16-bit
- PAM (Portable Arbitrary Map): P7, bilevel, gray, and rgb, with and
  without alpha, 8 and 16-bit
- PFM (Portable Float Map): Pf (gray) and PF (rgb)

The codec reads from and writes to open binary streams owned by the caller.
Every malformed header, sample, or payload raises an error; there is no
partial result.

This codec deviates from the Netpbm documentation in the following ways:

- The sign of the maximum sample value selects the byte order of all
  binary payloads, not only of PFM. A non-negative value (sign bit clear)
  means big-endian, a negative value means little-endian. Standard readers
  reject negative MAXVAL in PGM, PPM, and PAM files; such files should only
  be exchanged with this codec.
- P4 payloads are packed continuously, 8 samples per byte, without padding
  rows to byte boundaries. This only matters if the width is not a multiple
  of 8.
- Decoded PBM samples are inverted relative to the stored bits: a stored 0
  (white) is returned as 1, a stored 1 (black) as 0.

No gamma correction or scaling is performed.

:Author: `Christoph Gohlke <https://www.cgohlke.com>`_
:License: BSD 3-Clause
:Version: 2026.10.19

Quickstart
----------

Install the pnmcodec package and all dependencies from the
Python Package Index::

    python -m pip install -U pnmcodec[all]

See `Examples`_ for using the programming interface.

Requirements
------------

This release has been tested with the following requirements and dependencies
(other versions may work):

- `CPython 3.9, 3.10, 3.11, 3.12 <https://www.python.org>`_
- `NumPy 1.26 <https://pypi.org/project/numpy/>`_
- `Matplotlib 3.8 <https://pypi.org/project/matplotlib/>`_
  (optional for displaying images from the command line)

Revisions
---------

2026.10.19

- Initial release of the stream codec.

Examples
--------

Write a numpy array to a Netpbm file in grayscale binary format:

>>> data = numpy.array([[0, 1], [65534, 65535]], dtype=numpy.uint16)
>>> imwrite('_tmp.pgm', data)

Read the image data from a Netpbm file as numpy array:

>>> image = imread('_tmp.pgm')
>>> numpy.testing.assert_equal(image, data)

Access meta and image data in a Netpbm file:

>>> with PnmFile('_tmp.pgm') as pgm:
...     pgm.magicnumber
...     pgm.tupltype
...     pgm.shape
...     pgm.maxval
...     pgm.asarray().tolist()
'P5'
'GRAYSCALE'
(2, 2)
65535
[[0, 1], [65534, 65535]]

Encode samples to and decode samples from an open binary stream:

>>> import io
>>> stream = io.BytesIO()
>>> header = Header.create(Subtype.PIXMAP_BINARY, 2, 1)
>>> write_pnm_to_stream(stream, header, [10, 20, 30, 40, 50, 60])
>>> stream.getvalue()
b'P6\\n2 1\\n255\\n\\n\\x14\\x1e(2<'
>>> buffer = read_pnm_from_stream(io.BytesIO(stream.getvalue()))
>>> buffer.variant.name, buffer.asarray().tolist()
('Rgb8', [[[10, 20, 30], [40, 50, 60]]])

View the image and metadata in the Netpbm file from the command line::

    $ python -m pnmcodec _tmp.pgm

"""

from __future__ import annotations

__version__ = '2026.10.19'

__all__ = [
    'imread',
    'imwrite',
    'imsave',
    'PnmFile',
    'Header',
    'ImageBuffer',
    'BufferVariant',
    'BUFFER_VARIANTS',
    'buffer_variant',
    'Subtype',
    'Encoding',
    'Endian',
    'TupleType',
    'ImageFormat',
    'PnmSample',
    'BitSample',
    'U8Sample',
    'U16Sample',
    'F32Sample',
    'BIT',
    'U8',
    'U16',
    'F32',
    'read_pnm_from_stream',
    'read_pnm_data',
    'write_pnm_to_stream',
    'read_samples',
    'encode_samples',
    'ImageError',
    'DecodingError',
    'EncodingError',
    'PnmError',
    'ParseError',
    'UnknownMagicNumberError',
    'UnknownTupleTypeError',
    'UnknownAttributeError',
    'MissingTupleTypeError',
    'InvalidAttributeFormatError',
    'InvalidSampleError',
    'UnmatchedTupleTypeAndPixelSizeError',
    'UnmatchedTupleTypeAndDepthError',
    'NotEnoughSamplesError',
    'NotEnoughBufferError',
]

import sys
import os
import re
import enum
import math
import contextlib
import dataclasses
import warnings

import numpy

from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from typing import Any, BinaryIO, Iterator, Literal, Union

    from numpy.typing import ArrayLike, NDArray

    PathLike = Union[str, os.PathLike]
    ByteOrder = Union[Literal['>'], Literal['<']]
    MagicNumber = Union[
        Literal['P1'],
        Literal['P2'],
        Literal['P3'],
        Literal['P4'],
        Literal['P5'],
        Literal['P6'],
        Literal['P7'],
        Literal['Pf'],
        Literal['PF'],
    ]


def imread(file: PathLike | BinaryIO, /) -> numpy.ndarray:
    """Return image data from Netpbm file.

    Parameters:
        file:
            Name of file or open binary file to read.
            An open file is read from its current position and not closed.

    """
    with PnmFile(file) as pnm:
        image = pnm.asarray()
    return image


def imwrite(
    file: PathLike | BinaryIO,
    data: ArrayLike,
    /,
    *,
    magicnumber: MagicNumber | None = None,
    maxval: int | float | None = None,
    tupltype: str | None = None,
    byteorder: ByteOrder | None = None,
    comment: str | None = None,
) -> None:
    """Write image data to Netpbm file.

    Parameters:
        file:
            Name of file or open binary file to write.
        data:
            Image data to write.
        magicnumber:
            Netpbm format to write.
            By default, this is determined from the data shape and dtype.
        maxval:
            Maximum value of image samples.
            By default, this is determined from the data.
        tupltype:
            Kind of PAM image.
            By default, this is determined from the data shape and maxval.
        byteorder:
            Byte order of binary image data.
            By default, the byte order is '>'.
            Little-endian data is signaled by a negative maxval.
        comment:
            Single line ASCII string to write to the header.
            Maximum 66 characters.

    """
    with PnmFile.fromdata(
        data,
        magicnumber=magicnumber,
        maxval=maxval,
        tupltype=tupltype,
        byteorder=byteorder,
    ) as pnm:
        pnm.write(file, comment=comment)


imsave = imwrite


class ImageFormat(enum.Enum):
    """Image format tag of decoding and encoding errors."""

    PNM = 'Pnm'

    def __str__(self) -> str:
        return self.value


class Encoding(enum.Enum):
    """Sample encoding implied by magic number."""

    ASCII = 'ascii'
    BINARY = 'binary'

    @property
    def is_ascii(self) -> bool:
        return self is Encoding.ASCII


class Endian(enum.Enum):
    """Byte order of binary samples, as numpy byte order character."""

    BIG = '>'
    LITTLE = '<'


class TupleType(enum.Enum):
    """Semantic channel layout of pixels.

    The values of the six PAM tuple types are their TUPLTYPE literals.

    """

    BLACKANDWHITE_BIT = 'BLACKANDWHITE_BIT'
    """PBM bits. Decoded 1 is white, 0 is black."""

    BLACKANDWHITE = 'BLACKANDWHITE'
    """PAM bilevel. 0 is black, 1 is white."""

    GRAYSCALE = 'GRAYSCALE'
    RGB = 'RGB'
    BLACKANDWHITE_ALPHA = 'BLACKANDWHITE_ALPHA'
    GRAYSCALE_ALPHA = 'GRAYSCALE_ALPHA'
    RGB_ALPHA = 'RGB_ALPHA'
    FLOAT_GRAYSCALE = 'FLOAT_GRAYSCALE'
    FLOAT_RGB = 'FLOAT_RGB'

    @classmethod
    def fromliteral(cls, literal: str, /) -> TupleType:
        """Return tuple type of TUPLTYPE literal in PAM header."""
        try:
            return TUPLTYPE[literal]
        except KeyError:
            raise UnknownTupleTypeError(literal) from None

    @property
    def literal(self) -> str:
        """TUPLTYPE literal in PAM header."""
        for literal, tuple_type in TUPLTYPE.items():
            if tuple_type is self:
                return literal
        raise UnknownTupleTypeError(self.value)


TUPLTYPE: dict[str, TupleType] = {
    tuple_type.value: tuple_type
    for tuple_type in (
        TupleType.BLACKANDWHITE,
        TupleType.GRAYSCALE,
        TupleType.RGB,
        TupleType.BLACKANDWHITE_ALPHA,
        TupleType.GRAYSCALE_ALPHA,
        TupleType.RGB_ALPHA,
    )
}
"""Map PAM TUPLTYPE literals to tuple types."""


class Subtype(enum.Enum):
    """Netpbm format family and sample encoding, keyed by magic number."""

    BITMAP_ASCII = 'P1'
    GRAYMAP_ASCII = 'P2'
    PIXMAP_ASCII = 'P3'
    BITMAP_BINARY = 'P4'
    GRAYMAP_BINARY = 'P5'
    PIXMAP_BINARY = 'P6'
    ARBITRARY_MAP = 'P7'
    FLOAT_GRAYMAP = 'Pf'
    FLOAT_PIXMAP = 'PF'

    @classmethod
    def frommagic(cls, magic: bytes, /) -> Subtype:
        """Return subtype of 2-byte magic number."""
        try:
            return cls(magic.decode('ascii'))
        except ValueError:
            # also UnicodeDecodeError
            raise UnknownMagicNumberError(magic) from None

    @classmethod
    def bitmap(cls, encoding: Encoding, /) -> Subtype:
        if encoding is Encoding.ASCII:
            return cls.BITMAP_ASCII
        return cls.BITMAP_BINARY

    @classmethod
    def graymap(cls, encoding: Encoding, /) -> Subtype:
        if encoding is Encoding.ASCII:
            return cls.GRAYMAP_ASCII
        return cls.GRAYMAP_BINARY

    @classmethod
    def pixmap(cls, encoding: Encoding, /) -> Subtype:
        if encoding is Encoding.ASCII:
            return cls.PIXMAP_ASCII
        return cls.PIXMAP_BINARY

    @property
    def magic_number(self) -> str:
        return self.value

    @property
    def encoding(self) -> Encoding:
        """Sample encoding. PAM and PFM are binary only."""
        if self.value in 'P1 P2 P3':
            return Encoding.ASCII
        return Encoding.BINARY

    @property
    def is_bit_map(self) -> bool:
        return self.value in 'P1 P4'

    @property
    def is_gray_map(self) -> bool:
        return self.value in 'P2 P5'

    @property
    def is_pix_map(self) -> bool:
        return self.value in 'P3 P6'

    @property
    def is_arbitrary_map(self) -> bool:
        return self is Subtype.ARBITRARY_MAP

    @property
    def is_float_map(self) -> bool:
        return self.value in 'Pf PF'


SUBTYPE_LAYOUT: dict[Subtype, tuple[int, TupleType]] = {
    Subtype.BITMAP_ASCII: (1, TupleType.BLACKANDWHITE_BIT),
    Subtype.GRAYMAP_ASCII: (1, TupleType.GRAYSCALE),
    Subtype.PIXMAP_ASCII: (3, TupleType.RGB),
    Subtype.BITMAP_BINARY: (1, TupleType.BLACKANDWHITE_BIT),
    Subtype.GRAYMAP_BINARY: (1, TupleType.GRAYSCALE),
    Subtype.PIXMAP_BINARY: (3, TupleType.RGB),
    Subtype.FLOAT_GRAYMAP: (1, TupleType.FLOAT_GRAYSCALE),
    Subtype.FLOAT_PIXMAP: (3, TupleType.FLOAT_RGB),
}
"""Number of channels and tuple type implied by subtypes other than PAM."""


class ImageError(Exception):
    """Base class of errors raised while decoding or encoding images.

    Parameters:
        fmt:
            Format of the image being decoded or encoded.
        err:
            Underlying error.

    """

    action = 'image'

    fmt: ImageFormat
    """Format of the image being decoded or encoded."""

    err: BaseException
    """Underlying error."""

    def __init__(self, fmt: ImageFormat, err: BaseException, /) -> None:
        super().__init__(fmt, err)
        self.fmt = fmt
        self.err = err

    def __str__(self) -> str:
        return f'{self.action} error [{self.fmt}]: {self.err}'


class DecodingError(ImageError):
    """Error raised while reading an image."""

    action = 'decoding'


class EncodingError(ImageError):
    """Error raised while writing an image."""

    action = 'encoding'


class PnmError(ValueError):
    """Base class of malformed Netpbm header, sample, or payload errors."""


class ParseError(PnmError):
    """Header or sample token is not a valid number.

    Parameters:
        kind:
            Expected kind of number, 'int' or 'float'.
        err:
            Underlying parse error.

    """

    def __init__(self, kind: str, err: ValueError, /) -> None:
        super().__init__(f'{kind} parse error: {err}')
        self.kind = kind
        self.err = err


class UnknownMagicNumberError(PnmError):
    def __init__(self, magic: bytes, /) -> None:
        super().__init__(f'unknown magic number {magic!r}')
        self.magic = magic


class UnknownTupleTypeError(PnmError):
    def __init__(self, name: str, /) -> None:
        super().__init__(f'unknown tuple type {name!r}')
        self.name = name


class UnknownAttributeError(PnmError):
    def __init__(self, attribute: str, /) -> None:
        super().__init__(f'unknown attribute: {attribute}')
        self.attribute = attribute


class MissingTupleTypeError(PnmError):
    def __init__(self) -> None:
        super().__init__('missing tuple type')


class InvalidAttributeFormatError(PnmError):
    def __init__(self, line: str, /) -> None:
        super().__init__(f'invalid attribute format: {line!r}')
        self.line = line


class InvalidSampleError(PnmError):
    def __init__(self, value: int | float, /) -> None:
        super().__init__(f'invalid sample value: {value}')
        self.value = value


class UnmatchedTupleTypeAndPixelSizeError(PnmError):
    def __init__(self, tuple_type: TupleType, pixel_size: int, /) -> None:
        super().__init__(
            'unmatched tuple type and pixel size: '
            f'{tuple_type.value} and {pixel_size}'
        )
        self.tuple_type = tuple_type
        self.pixel_size = pixel_size


class UnmatchedTupleTypeAndDepthError(PnmError):
    def __init__(self, tuple_type: TupleType, depth: int, /) -> None:
        super().__init__(
            f'unmatched tuple type and depth: {tuple_type.value} and {depth}'
        )
        self.tuple_type = tuple_type
        self.depth = depth


class NotEnoughSamplesError(PnmError):
    """Input holds fewer samples than required.

    Counts are in bytes for binary payloads, bits for PBM payloads, and
    tokens for ASCII payloads.

    """

    def __init__(self, required: int, provided: int, /) -> None:
        super().__init__(
            f'not enough samples: {required} required, {provided} provided'
        )
        self.required = required
        self.provided = provided


class NotEnoughBufferError(PnmError):
    """Output buffer is smaller than required for encoded samples."""

    def __init__(self, required: int, provided: int, /) -> None:
        super().__init__(
            f'not enough space: {required} bytes required, '
            f'{provided} bytes provided'
        )
        self.required = required
        self.provided = provided


@contextlib.contextmanager
def image_errors(
    error: type[ImageError], fmt: ImageFormat = ImageFormat.PNM, /
) -> Iterator[None]:
    """Wrap codec and I/O errors raised in context in ImageError."""
    try:
        yield
    except (PnmError, OSError, EOFError) as exc:
        raise error(fmt, exc) from exc


INT_TOKEN = re.compile(r'\+?[0-9]+')


def parse_int(token: str, /, maxval: int = 2**32 - 1) -> int:
    """Return unsigned integer parsed from ASCII token."""
    if not token:
        err = ValueError('cannot parse integer from empty string')
    elif INT_TOKEN.fullmatch(token) is None:
        err = ValueError(f'invalid digit found in {token!r}')
    elif int(token) > maxval:
        err = ValueError(f'number too large to fit in target type {token!r}')
    else:
        return int(token)
    raise ParseError('int', err) from err


def parse_float(token: str, /) -> float:
    """Return value of ASCII token rounded to 32-bit float."""
    try:
        value = float(token)
    except ValueError as exc:
        raise ParseError('float', exc) from exc
    with numpy.errstate(over='ignore'):
        return float(numpy.float32(value))


def format_float(value: float, /) -> str:
    """Return shortest decimal string reproducing 32-bit float value."""
    return numpy.format_float_positional(numpy.float32(value), trim='-')


class PnmSample:
    """Encode and decode one kind of Netpbm sample.

    Samples are decoded from whitespace separated ASCII tokens or from
    binary payloads. Decoded arrays are in native byte order.

    """

    name: str
    """Short name of sample kind."""

    dtype: numpy.dtype
    """Native data type of decoded samples."""

    n_bytes: int
    """Number of bytes per sample in binary payloads."""

    maxval: int | None = None
    """Largest valid integer sample value."""

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} {self.name!r}>'

    def decode_ascii(self, token: str, /) -> int | float:
        """Return sample value parsed from ASCII token."""
        return parse_int(token, self.maxval)

    def encode_ascii(self, value: int | float, /) -> str:
        """Return ASCII token of sample value."""
        return str(int(value))

    def payload_size(self, count: int, /) -> int:
        """Return number of bytes of count samples in binary payload."""
        return count * self.n_bytes

    def filedtype(self, endian: Endian, /) -> numpy.dtype:
        """Return data type of samples in binary payload."""
        return self.dtype.newbyteorder(endian.value)

    def decode_bytes(
        self, data: bytes, count: int, endian: Endian = Endian.BIG, /
    ) -> NDArray[Any]:
        """Return count samples decoded from binary payload.

        Raises:
            NotEnoughSamplesError: data is shorter than required.

        """
        required = self.payload_size(count)
        if len(data) < required:
            raise NotEnoughSamplesError(required, len(data))
        if count == 0:
            return numpy.empty(0, self.dtype)
        return numpy.frombuffer(data, self.filedtype(endian), count).astype(
            self.dtype
        )

    def encode_bytes(
        self,
        samples: ArrayLike,
        buffer: bytearray,
        endian: Endian = Endian.BIG,
        /,
    ) -> None:
        """Encode samples into writable buffer.

        Raises:
            NotEnoughBufferError: buffer is smaller than required.

        """
        samples = self.validate(samples)
        required = self.payload_size(samples.size)
        if len(buffer) < required:
            raise NotEnoughBufferError(required, len(buffer))
        if samples.size == 0:
            return
        out = numpy.frombuffer(buffer, self.filedtype(endian), samples.size)
        out[:] = samples

    def validate(self, samples: ArrayLike, /) -> NDArray[Any]:
        """Return flat samples as native dtype array.

        Raises:
            InvalidSampleError: integer sample value is out of range.

        """
        samples = numpy.asarray(samples).reshape(-1)
        if self.maxval is not None and samples.size > 0:
            invalid = (samples < 0) | (samples > self.maxval)
            if samples.dtype.kind == 'f':
                invalid |= samples != numpy.floor(samples)
            if numpy.any(invalid):
                raise InvalidSampleError(samples[invalid][0].item())
        return samples.astype(self.dtype)


class BitSample(PnmSample):
    """PBM sample, packed 8 per byte, inverted relative to stored bit."""

    name = 'bit'
    dtype = numpy.dtype('u1')
    n_bytes = 1
    maxval = 1

    def decode_ascii(self, token: str, /) -> int:
        value = parse_int(token, 255)
        if value > 1:
            raise InvalidSampleError(value)
        return 1 - value

    def encode_ascii(self, value: int | float, /) -> str:
        return str(1 - int(value))

    def payload_size(self, count: int, /) -> int:
        return (count + 7) // 8

    def decode_bytes(
        self, data: bytes, count: int, endian: Endian = Endian.BIG, /
    ) -> NDArray[Any]:
        # counts in bits; unused low bits of the last byte are ignored
        if len(data) * 8 < count:
            raise NotEnoughSamplesError(count, len(data) * 8)
        if count == 0:
            return numpy.empty(0, self.dtype)
        packed = numpy.frombuffer(data, 'u1', self.payload_size(count))
        return 1 - numpy.unpackbits(packed, count=count)

    def encode_bytes(
        self,
        samples: ArrayLike,
        buffer: bytearray,
        endian: Endian = Endian.BIG,
        /,
    ) -> None:
        samples = self.validate(samples)
        required = self.payload_size(samples.size)
        if len(buffer) < required:
            raise NotEnoughBufferError(required, len(buffer))
        buffer[:required] = numpy.packbits(1 - samples).tobytes()


class U8Sample(PnmSample):
    """8-bit unsigned integer sample."""

    name = 'u8'
    dtype = numpy.dtype('u1')
    n_bytes = 1
    maxval = 255


class U16Sample(PnmSample):
    """16-bit unsigned integer sample."""

    name = 'u16'
    dtype = numpy.dtype('u2')
    n_bytes = 2
    maxval = 65535


class F32Sample(PnmSample):
    """32-bit floating point sample."""

    name = 'f32'
    dtype = numpy.dtype('f4')
    n_bytes = 4

    def decode_ascii(self, token: str, /) -> float:
        return parse_float(token)

    def encode_ascii(self, value: int | float, /) -> str:
        return format_float(value)


BIT = BitSample()
U8 = U8Sample()
U16 = U16Sample()
F32 = F32Sample()


class BufferVariant(NamedTuple):
    """Kind of image buffer selected by tuple type and pixel size."""

    name: str
    sample: PnmSample
    n_channels: int


BUFFER_VARIANTS: dict[tuple[TupleType, int], BufferVariant] = {
    # bit maps match any pixel size
    (TupleType.BLACKANDWHITE_BIT, 1): BufferVariant('Bitmap', BIT, 1),
    (TupleType.BLACKANDWHITE, 1): BufferVariant('Luma8', U8, 1),
    (TupleType.GRAYSCALE, 1): BufferVariant('Luma8', U8, 1),
    (TupleType.GRAYSCALE, 2): BufferVariant('Luma16', U16, 1),
    (TupleType.BLACKANDWHITE_ALPHA, 1): BufferVariant('LumaA8', U8, 2),
    (TupleType.GRAYSCALE_ALPHA, 1): BufferVariant('LumaA8', U8, 2),
    (TupleType.GRAYSCALE_ALPHA, 2): BufferVariant('LumaA16', U16, 2),
    (TupleType.RGB, 1): BufferVariant('Rgb8', U8, 3),
    (TupleType.RGB, 2): BufferVariant('Rgb16', U16, 3),
    (TupleType.RGB_ALPHA, 1): BufferVariant('RgbA8', U8, 4),
    (TupleType.RGB_ALPHA, 2): BufferVariant('RgbA16', U16, 4),
    (TupleType.FLOAT_GRAYSCALE, 4): BufferVariant('Luma32F', F32, 1),
    (TupleType.FLOAT_RGB, 4): BufferVariant('Rgb32F', F32, 3),
}
"""Image buffer variants keyed by tuple type and bytes per channel."""


def buffer_variant(tuple_type: TupleType, pixel_size: int, /) -> BufferVariant:
    """Return image buffer variant of tuple type and bytes per channel.

    Raises:
        UnmatchedTupleTypeAndPixelSizeError: no variant matches.

    """
    if tuple_type is TupleType.BLACKANDWHITE_BIT:
        return BUFFER_VARIANTS[tuple_type, 1]
    try:
        return BUFFER_VARIANTS[tuple_type, pixel_size]
    except KeyError:
        raise UnmatchedTupleTypeAndPixelSizeError(
            tuple_type, pixel_size
        ) from None


@dataclasses.dataclass(frozen=True)
class Header:
    """Netpbm header of one image.

    Use :py:meth:`Header.decode` to parse a header from a stream and
    :py:meth:`Header.create` to derive one from a subtype and dimensions.

    """

    subtype: Subtype
    """Magic number family and sample encoding."""

    width: int
    """Number of columns in image."""

    height: int
    """Number of rows in image."""

    max_val: float
    """Maximum sample value. The sign selects the byte order of binary
    payloads: sign bit clear is big-endian, set is little-endian."""

    n_channels: int
    """Number of samples per pixel."""

    tuple_type: TupleType
    """Semantic channel layout of pixels."""

    @classmethod
    def create(
        cls,
        subtype: Subtype,
        width: int,
        height: int,
        /,
        *,
        max_val: float | None = None,
        n_channels: int | None = None,
        tuple_type: TupleType | None = None,
    ) -> Header:
        """Return header with fields not given derived from subtype.

        Parameters:
            subtype:
                Netpbm format family and encoding.
            width, height:
                Image dimensions.
            max_val:
                Maximum sample value. Negative for little-endian payload.
                By default, 255 for integer and 1 for float subtypes.
                Always 1 for bit maps.
            n_channels:
                Number of samples per pixel.
                By default, this is determined from subtype or tuple type.
            tuple_type:
                Kind of PAM image. Required for PAM, else derived from
                subtype.

        """
        if not (0 <= width < 2**32 and 0 <= height < 2**32):
            raise ValueError(f'image size {width}x{height} out of range')
        if subtype is Subtype.ARBITRARY_MAP:
            if tuple_type is None:
                raise MissingTupleTypeError()
            if n_channels is None:
                n_channels = next(
                    variant.n_channels
                    for (key, _), variant in BUFFER_VARIANTS.items()
                    if key is tuple_type
                )
        else:
            channels, derived = SUBTYPE_LAYOUT[subtype]
            if tuple_type not in (None, derived) or n_channels not in (
                None,
                channels,
            ):
                raise ValueError(
                    f'{subtype.magic_number} requires {channels} channels '
                    f'of {derived.value}'
                )
            n_channels, tuple_type = channels, derived
        if subtype.is_bit_map:
            max_val = 1.0
        elif max_val is None:
            max_val = 1.0 if subtype.is_float_map else 255.0
        return cls(
            subtype,
            width,
            height,
            float(numpy.float32(max_val)),
            n_channels,
            tuple_type,
        )

    @classmethod
    def decode(cls, stream: BinaryIO, /) -> Header:
        """Return header read from stream.

        The stream is left positioned at the first byte of the payload.

        Raises:
            UnknownMagicNumberError, ParseError, UnknownAttributeError,
            UnknownTupleTypeError, InvalidAttributeFormatError,
            MissingTupleTypeError: malformed header.
            EOFError: stream ended within header.

        """
        magic = read_bytes(stream, 2)
        if len(magic) < 2:
            raise EOFError(f'stream too short for magic number {magic!r}')
        subtype = Subtype.frommagic(magic)
        if subtype is Subtype.ARBITRARY_MAP:
            return cls._decode_pam(stream)
        return cls._decode_pnm(stream, subtype)

    @classmethod
    def _decode_pnm(cls, stream: BinaryIO, subtype: Subtype, /) -> Header:
        """Return header of simple grammar following magic number."""
        tokens = read_tokens(stream, 2 if subtype.is_bit_map else 3)
        width = parse_int(tokens[0])
        height = parse_int(tokens[1])
        max_val = 1.0 if subtype.is_bit_map else parse_float(tokens[2])
        n_channels, tuple_type = SUBTYPE_LAYOUT[subtype]
        return cls(subtype, width, height, max_val, n_channels, tuple_type)

    @classmethod
    def _decode_pam(cls, stream: BinaryIO, /) -> Header:
        """Return header of PAM attribute lines following magic number."""
        width = height = depth = 0
        max_val = 0.0
        tuple_type = None
        while True:
            line = stream.readline()
            if not line:
                raise EOFError('stream ended before ENDHDR')
            line = line.decode('ascii', 'replace').strip()
            if not line or line.startswith('#'):
                continue
            items = line.split()
            if items[0] == 'ENDHDR':
                break
            if len(items) % 2:
                raise InvalidAttributeFormatError(line)
            for attribute, value in zip(items[::2], items[1::2]):
                if attribute == 'ENDHDR':
                    break
                if attribute == 'WIDTH':
                    width = parse_int(value)
                elif attribute == 'HEIGHT':
                    height = parse_int(value)
                elif attribute == 'DEPTH':
                    depth = parse_int(value)
                elif attribute == 'MAXVAL':
                    max_val = parse_float(value)
                elif attribute == 'TUPLTYPE':
                    tuple_type = TupleType.fromliteral(value)
                else:
                    raise UnknownAttributeError(attribute)
            else:
                continue
            break
        if tuple_type is None:
            raise MissingTupleTypeError()
        return cls(
            Subtype.ARBITRARY_MAP, width, height, max_val, depth, tuple_type
        )

    def format(self, comment: str | None = None) -> str:
        """Return header text.

        Parameters:
            comment:
                Single line ASCII string to write after magic number.
                Maximum 66 characters.

        Raises:
            UnknownTupleTypeError: tuple type has no PAM literal.

        """
        lines = [self.subtype.magic_number]
        comment = header_comment(comment)
        if comment:
            lines.append(f'# {comment}')
        if self.subtype is Subtype.ARBITRARY_MAP:
            lines.extend(
                (
                    f'WIDTH {self.width}',
                    f'HEIGHT {self.height}',
                    f'DEPTH {self.n_channels}',
                    f'MAXVAL {format_float(self.max_val)}',
                    f'TUPLTYPE {self.tuple_type.literal}',
                    'ENDHDR',
                )
            )
        elif self.subtype.is_bit_map:
            lines.append(f'{self.width} {self.height}')
        else:
            lines.append(f'{self.width} {self.height}')
            lines.append(format_float(self.max_val))
        return '\n'.join(lines) + '\n'

    def tobytes(self, comment: str | None = None) -> bytes:
        """Return header as bytes."""
        return self.format(comment).encode('ascii')

    def encode(self, stream: BinaryIO, /, comment: str | None = None) -> None:
        """Write header to stream."""
        stream.write(self.tobytes(comment))

    @property
    def encoding(self) -> Encoding:
        return self.subtype.encoding

    @property
    def n_samples(self) -> int:
        """Number of samples in image."""
        return self.width * self.height * self.n_channels

    def bytes_per_channel(self) -> int:
        """Return number of bytes per sample.

        Integer sample sizes are the minimum number of bytes holding
        ``abs(max_val)``. Non-finite max_val result in 0.

        """
        if self.subtype.is_float_map:
            return 4
        if self.subtype.is_bit_map:
            return 1
        maxval = abs(self.max_val)
        if not math.isfinite(maxval):
            return 0
        if maxval < 1.0:
            return 1
        # exponent of frexp is floor(log2(maxval)) + 1
        return (math.frexp(maxval)[1] - 1) // 8 + 1

    def endian(self) -> Endian:
        """Return byte order of binary payload from sign of max_val."""
        if math.copysign(1.0, self.max_val) < 0.0:
            return Endian.LITTLE
        return Endian.BIG

    def variant(self) -> BufferVariant:
        """Return image buffer variant of tuple type and sample size.

        Raises:
            UnmatchedTupleTypeAndPixelSizeError: no variant matches.
            UnmatchedTupleTypeAndDepthError: channels do not match variant.

        """
        variant = buffer_variant(self.tuple_type, self.bytes_per_channel())
        if variant.n_channels != self.n_channels:
            raise UnmatchedTupleTypeAndDepthError(
                self.tuple_type, self.n_channels
            )
        return variant

    def sample_kind(self) -> PnmSample:
        """Return codec of samples in payload."""
        return self.variant().sample

    def payload_size(self) -> int:
        """Return number of bytes of binary payload."""
        return self.sample_kind().payload_size(self.n_samples)


def header_comment(comment: str | None, /) -> str:
    """Return comment reduced to single ASCII line of up to 66 characters."""
    if not comment:
        return ''
    line = comment.split('\n')[0].strip()
    line.encode('ascii')
    if len(line) > 66:
        log_warning('truncating header comment to 66 characters')
        line = line[:66]
    return line


READ_CHUNKSIZE = 2**20
"""Maximum number of bytes requested from stream per read call."""


def read_bytes(stream: BinaryIO, size: int, /) -> bytes:
    """Return size bytes read from stream, fewer only at end of stream."""
    chunks = []
    while size > 0:
        data = stream.read(min(size, READ_CHUNKSIZE))
        if not data:
            break
        chunks.append(data)
        size -= len(data)
    return b''.join(chunks)


def read_tokens(stream: BinaryIO, count: int, /) -> list[str]:
    """Return count whitespace separated tokens of simple header grammar.

    '#' starts a comment running to the end of the line. Exactly one
    whitespace character is consumed after the last token.

    """
    tokens: list[str] = []
    token = bytearray()
    while len(tokens) < count:
        char = stream.read(1)
        if char == b'#':
            stream.readline()
            char = b'\n'
        if char and not char.isspace():
            token += char
            continue
        if token:
            tokens.append(token.decode('ascii', 'replace'))
            token = bytearray()
        if not char and len(tokens) < count:
            raise EOFError(
                f'stream ended after {len(tokens)} of {count} header values'
            )
    return tokens


def read_samples(
    stream: BinaryIO,
    sample: PnmSample,
    n_samples: int,
    encoding: Encoding,
    endian: Endian = Endian.BIG,
    /,
) -> NDArray[Any]:
    """Return n_samples samples read from stream.

    Raises:
        NotEnoughSamplesError: stream ended before n_samples were read.

    """
    if encoding.is_ascii:
        return read_samples_ascii(stream, sample, n_samples)
    data = read_bytes(stream, sample.payload_size(n_samples))
    return sample.decode_bytes(data, n_samples, endian)


def read_samples_ascii(
    stream: BinaryIO, sample: PnmSample, n_samples: int, /
) -> NDArray[Any]:
    """Return n_samples samples parsed from ASCII lines of stream.

    The stream is consumed to the end of the line holding the last sample.
    Tokens following the last sample on that line are discarded.

    """
    values = []
    while len(values) < n_samples:
        line = stream.readline()
        if not line:
            raise NotEnoughSamplesError(n_samples, len(values))
        for token in line.split(b'#', 1)[0].split():
            token = token.decode('ascii', 'replace')
            values.append(sample.decode_ascii(token))
            if len(values) == n_samples:
                break
    return numpy.array(values, sample.dtype)


def encode_samples(
    sample: PnmSample,
    samples: ArrayLike,
    n_samples: int,
    encoding: Encoding,
    endian: Endian = Endian.BIG,
    rowsize: int = 0,
    /,
) -> bytes:
    """Return payload of samples.

    Parameters:
        sample:
            Kind of samples.
        samples:
            Flat sequence of samples.
        n_samples:
            Number of samples the binary buffer is allocated for.
        encoding:
            ASCII or binary payload.
        endian:
            Byte order of binary payload.
        rowsize:
            Number of ASCII tokens per line.
            By default, all tokens are written to one line.

    """
    samples = sample.validate(samples)
    if encoding is Encoding.BINARY:
        buffer = bytearray(sample.payload_size(n_samples))
        sample.encode_bytes(samples, buffer, endian)
        return bytes(buffer)
    values = samples.tolist()
    if rowsize < 1:
        rowsize = max(1, len(values))
    return ''.join(
        ' '.join(sample.encode_ascii(v) for v in values[i : i + rowsize])
        + '\n'
        for i in range(0, len(values), rowsize)
    ).encode('ascii')


def read_pnm_from_stream(stream: BinaryIO, /) -> ImageBuffer:
    """Return image decoded from header and payload in stream.

    Raises:
        DecodingError: malformed or truncated stream, or I/O failure.

    """
    with image_errors(DecodingError):
        return _read_image(stream, Header.decode(stream))


def read_pnm_data(stream: BinaryIO, header: Header, /) -> ImageBuffer:
    """Return image decoded from payload following header in stream.

    Raises:
        DecodingError: malformed or truncated payload, or I/O failure.

    """
    with image_errors(DecodingError):
        return _read_image(stream, header)


def _read_image(stream: BinaryIO, header: Header, /) -> ImageBuffer:
    variant = header.variant()
    samples = read_samples(
        stream,
        variant.sample,
        header.n_samples,
        header.encoding,
        header.endian(),
    )
    return ImageBuffer(variant, header.width, header.height, samples)


def write_pnm_to_stream(
    stream: BinaryIO,
    header: Header,
    samples: ArrayLike,
    /,
    *,
    comment: str | None = None,
) -> None:
    """Write header and samples to stream.

    Nothing is written if the header or samples are invalid.

    Parameters:
        stream:
            Open binary stream to write.
        header:
            Header of image.
        samples:
            Flat sequence of ``header.n_samples`` samples in row-major order.
        comment:
            Single line ASCII string to write to header.

    Raises:
        EncodingError: invalid header or samples, or I/O failure.

    """
    with image_errors(EncodingError):
        variant = header.variant()
        samples = variant.sample.validate(samples)
        n_samples = header.n_samples
        if samples.size < n_samples:
            raise NotEnoughSamplesError(n_samples, samples.size)
        if samples.size > n_samples:
            raise NotEnoughBufferError(
                variant.sample.payload_size(samples.size),
                variant.sample.payload_size(n_samples),
            )
        if header.encoding is Encoding.BINARY:
            if (
                header.endian() is Endian.LITTLE
                and variant.sample.n_bytes > 1
                and not header.subtype.is_float_map
            ):
                log_warning(
                    'writing non-standard little-endian %s payload',
                    header.subtype.magic_number,
                )
            if header.subtype.is_bit_map and header.width % 8:
                log_warning('writing P4 payload without row padding')
        payload = encode_samples(
            variant.sample,
            samples,
            n_samples,
            header.encoding,
            header.endian(),
            header.width * header.n_channels,
        )
        header.encode(stream, comment=comment)
        stream.write(payload)


class ImageBuffer:
    """Samples of one image, grouped into pixels of n_channels samples.

    Parameters:
        variant:
            Kind of image buffer.
        width, height:
            Image dimensions.
        samples:
            Flat sequence of ``width * height * variant.n_channels`` samples
            in row-major order.

    """

    variant: BufferVariant
    """Kind of image buffer."""

    width: int
    """Number of columns in image."""

    height: int
    """Number of rows in image."""

    samples: numpy.ndarray
    """Flat array of samples in native byte order."""

    def __init__(
        self,
        variant: BufferVariant,
        width: int,
        height: int,
        samples: ArrayLike,
        /,
    ) -> None:
        samples = variant.sample.validate(samples)
        size = width * height * variant.n_channels
        if samples.size != size:
            raise ValueError(
                f'{variant.name} buffer of size {width}x{height} '
                f'requires {size} samples, got {samples.size}'
            )
        self.variant = variant
        self.width = width
        self.height = height
        self.samples = samples

    @property
    def n_channels(self) -> int:
        return self.variant.n_channels

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def dtype(self) -> numpy.dtype:
        return self.samples.dtype

    def asarray(self) -> numpy.ndarray:
        """Return samples as array of shape (height, width[, channels])."""
        shape: tuple[int, ...] = (self.height, self.width)
        if self.n_channels > 1:
            shape += (self.n_channels,)
        return self.samples.reshape(shape)

    def pixels(self) -> numpy.ndarray:
        """Return samples as array of shape (width * height, channels)."""
        return self.samples.reshape(-1, self.n_channels)

    def pixel_at(self, x: int, y: int, /) -> numpy.ndarray | None:
        """Return samples of pixel at column x and row y, or None outside."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        index = (y * self.width + x) * self.n_channels
        return self.samples[index : index + self.n_channels]

    def __repr__(self) -> str:
        return (
            f'<{self.__class__.__name__} {self.variant.name} '
            f'{self.width}x{self.height}>'
        )


class PnmFile:
    """Read and write Netpbm files.

    The header is read on initialization, the image data on the first call
    to :py:meth:`asarray` or :py:meth:`asbuffer`.

    Parameters:
        file:
            Name of file or open binary file to read.
            An open file is read from its current position and left open.

    Raises:
        DecodingError: file is not a valid Netpbm stream.

    """

    header: Header
    """Netpbm header."""

    filename: str
    """File name."""

    _buffer: ImageBuffer | None
    _fh: BinaryIO | None

    def __init__(self, file: PathLike | BinaryIO | None, /) -> None:
        # initialize instance from filename or open file
        self.filename = ''
        self._buffer = None
        self._fh = None

        if file is None:
            return

        if isinstance(file, (str, os.PathLike)):
            self._fh = open(file, 'rb')
            self.filename = os.fspath(file)
        else:
            self._fh = file

        try:
            with image_errors(DecodingError):
                self.header = Header.decode(self._fh)
                self.header.variant()
        except Exception:
            self.close()
            raise

    @classmethod
    def fromdata(
        cls,
        data: ArrayLike,
        /,
        *,
        magicnumber: MagicNumber | None = None,
        maxval: int | float | None = None,
        tupltype: str | None = None,
        byteorder: ByteOrder | None = None,
    ) -> PnmFile:
        """Initialize instance from numpy array.

        Parameters:
            data:
                Image data of shape (height, width[, channels]).
                Boolean data are bit maps, True being white.
            magicnumber:
                ID determining Netpbm type.
                By default, this is determined from the data shape and dtype.
            maxval:
                Maximum value of image samples.
                By default, this is determined from the data.
            tupltype:
                Kind of PAM image.
                By default, this is determined from the data shape and maxval.
            byteorder:
                Byte order of binary image data, '>' (default) or '<'.

        """
        data = numpy.array(data, ndmin=2, copy=True)
        if data.ndim > 3:
            raise ValueError(f'shape {data.shape} not supported')
        if data.dtype.kind not in 'buif':
            raise ValueError(f'dtype {data.dtype!r} not supported')
        height, width = data.shape[:2]
        depth = data.shape[2] if data.ndim == 3 else 1

        if magicnumber is None:
            if data.dtype.kind == 'b':
                magicnumber = 'P4'
            elif data.dtype.kind == 'f':
                magicnumber = 'Pf' if depth == 1 else 'PF'
            elif depth == 1:
                magicnumber = 'P5'
            elif depth == 3:
                magicnumber = 'P6'
            else:
                magicnumber = 'P7'
        try:
            subtype = Subtype(magicnumber)
        except ValueError:
            raise ValueError(f'invalid magicnumber {magicnumber!r}') from None

        if maxval is None:
            if subtype.is_bit_map or subtype.is_float_map:
                maxval = 1
            else:
                maxval = max(int(numpy.max(data)), 0) if data.size else 0
                maxval = max(
                    255, int(2 ** math.ceil(math.log2(maxval + 1)) - 1)
                )
        if not subtype.is_float_map and not 0 < maxval < 65536:
            raise ValueError(f'maxval {maxval} out of range')

        if byteorder is None or byteorder == '>':
            max_val = float(abs(maxval))
        elif byteorder == '<':
            max_val = -float(abs(maxval))
        else:
            raise ValueError(f'invalid byteorder {byteorder!r}')

        tuple_type = None
        if subtype is Subtype.ARBITRARY_MAP:
            if tupltype is not None:
                tuple_type = TupleType.fromliteral(tupltype)
            elif maxval == 1 and depth in (1, 2):
                tuple_type = (
                    TupleType.BLACKANDWHITE
                    if depth == 1
                    else TupleType.BLACKANDWHITE_ALPHA
                )
            else:
                tuple_type = {
                    1: TupleType.GRAYSCALE,
                    2: TupleType.GRAYSCALE_ALPHA,
                    3: TupleType.RGB,
                    4: TupleType.RGB_ALPHA,
                }.get(depth)
                if tuple_type is None:
                    raise ValueError(f'PAM with {depth} channels not valid')
        elif depth != SUBTYPE_LAYOUT[subtype][0]:
            raise ValueError(
                f'invalid magicnumber {magicnumber!r} for shape {data.shape}'
            )

        header = Header.create(
            subtype,
            width,
            height,
            max_val=max_val,
            n_channels=depth,
            tuple_type=tuple_type,
        )
        variant = header.variant()
        if data.dtype.kind == 'b':
            data = data.astype('u1')

        self = cls(None)
        self.header = header
        self._buffer = ImageBuffer(variant, width, height, data.reshape(-1))
        return self

    def asbuffer(self) -> ImageBuffer:
        """Return image buffer, reading image data on first call."""
        if self._buffer is None:
            if self._fh is None:
                raise ValueError('I/O operation on closed file')
            self._buffer = read_pnm_data(self._fh, self.header)
        return self._buffer

    def asarray(self, *, copy: bool = True) -> numpy.ndarray:
        """Return image array.

        Parameters:
            copy:
                Return a copy of image array.

        """
        data = self.asbuffer().asarray()
        return numpy.copy(data) if copy else data

    def write(
        self,
        file: PathLike | BinaryIO,
        /,
        *,
        comment: str | None = None,
    ) -> None:
        """Write instance to file.

        Parameters:
            file:
                Name of file or open binary file to write.
            comment:
                Single line ASCII string to write to the header.
                Maximum 66 characters.

        """
        samples = self.asbuffer().samples
        if isinstance(file, (str, os.PathLike)):
            with open(file, 'wb') as fh:
                write_pnm_to_stream(fh, self.header, samples, comment=comment)
        else:
            write_pnm_to_stream(file, self.header, samples, comment=comment)

    def close(self) -> None:
        """Close file opened by instance."""
        if self.filename and self._fh is not None:
            self._fh.close()
        self._fh = None

    @property
    def magicnumber(self) -> str:
        """ID determining Netpbm type."""
        return self.header.subtype.magic_number

    @property
    def width(self) -> int:
        """Number of columns in image."""
        return self.header.width

    @property
    def height(self) -> int:
        """Number of rows in image."""
        return self.header.height

    @property
    def depth(self) -> int:
        """Number of samples per pixel."""
        return self.header.n_channels

    @property
    def maxval(self) -> int | float:
        """Maximum value of image samples, or scale of PFM."""
        maxval = abs(self.header.max_val)
        if self.header.subtype.is_float_map:
            return maxval
        return int(maxval)

    @property
    def byteorder(self) -> ByteOrder:
        """Byte order of binary image data."""
        return self.header.endian().value  # type: ignore

    @property
    def tupltype(self) -> str:
        """Kind of image."""
        return self.header.tuple_type.value

    @property
    def dtype(self) -> numpy.dtype:
        """Data type of image array."""
        return self.header.variant().sample.dtype

    @property
    def shape(self) -> tuple[int, ...]:
        """Shape of image array."""
        shape: tuple[int, ...] = (self.height, self.width)
        if self.depth > 1:
            shape += (self.depth,)
        return shape

    @property
    def axes(self) -> str:
        """Axes of image array."""
        return 'YXS' if self.depth > 1 else 'YX'

    def __enter__(self) -> PnmFile:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __repr__(self) -> str:
        if self.filename:
            arg = f'{os.path.split(os.path.normcase(self.filename))[-1]!r}'
        elif self._fh is not None:
            arg = str(type(self._fh).__name__)
        else:
            arg = ''
        return f'<{self.__class__.__name__}({arg})>'

    def __str__(self) -> str:
        return indent(
            repr(self),
            f'magicnumber: {self.magicnumber}',
            f'tupltype: {self.tupltype}',
            f'axes: {self.axes}',
            f'shape: {self.shape}',
            f'dtype: {self.dtype}',
            f'byteorder: {self.byteorder}',
            f'scale: {self.maxval}'
            if self.header.subtype.is_float_map
            else f'maxval: {self.maxval}',
        )


def indent(*args) -> str:
    """Return joined string representations of objects with indented lines."""
    text = '\n'.join(str(arg) for arg in args)
    return '\n'.join(
        ('  ' + line if line else line) for line in text.splitlines() if line
    )[2:]


def log_warning(msg, *args, **kwargs):
    """Log message with level WARNING."""
    import logging

    logging.getLogger('pnmcodec').warning(msg, *args, **kwargs)


def display_image(
    image: numpy.ndarray, maxval: int | float, /
) -> tuple[numpy.ndarray, int | float]:
    """Return image and upper limit of its value range for display."""
    if image.ndim > 2 and image.shape[-1] == 2:
        warnings.warn('displaying luminance channel only')
        image = image[..., 0]
    if image.dtype.kind == 'f':
        return numpy.clip(image / maxval, 0.0, 1.0), 1.0
    if image.ndim > 2 and maxval != 255:
        warnings.warn('converting RGB image for display')
        image = image / float(maxval)
        image *= 255
        numpy.rint(image, out=image)
        numpy.clip(image, 0, 255, out=image)
        return image.astype('uint8'), 255
    return image, maxval


def main(argv: list[str] | None = None) -> int:
    """Command line usage main function.

    Show images specified on command line or all images in directory.

    """
    from glob import glob

    if argv is None:
        argv = sys.argv

    if len(argv) > 1 and '--doctest' in argv:
        import doctest

        doctest.testmod()
        return 0

    from matplotlib import pyplot

    if len(argv) == 1:
        files = glob('*.p*')
    elif '*' in argv[1]:
        files = glob(argv[1])
    elif os.path.isdir(argv[1]):
        files = glob(f'{argv[1]}/*.p*')
    else:
        files = argv[1:]

    for fname in files:
        try:
            with PnmFile(fname) as pnm:
                print(pnm)
                img = pnm.asarray(copy=False)
                print()
        except ImageError as exc:
            # raise  # enable for debugging
            print(fname, exc)
            continue

        title = f'{os.path.split(fname)[-1]} {pnm.magicnumber} {img.shape}'
        img, vmax = display_image(img, pnm.maxval)
        pyplot.imshow(img, 'gray', vmin=0, vmax=vmax, interpolation='nearest')
        pyplot.title(title)
        pyplot.show()
    return 0


if __name__ == '__main__':
    sys.exit(main())
