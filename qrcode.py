import base64
import io
import logging
import os
from typing import override

from PIL import Image

from bit_matrix import BitMatrix
from color import BLACK, WHITE
from encoding import Segment, check_version, create_data, get_best_version_for_data
from error_correction import ErrorCorrection
from exceptions import CapacityExceededError, EmptyInputError, VersionTooSmallError
from mask_evaluator import apply_mask, get_best_mask
from mask_pattern import MaskPattern
from qrcode_drawer import QRCodeDrawer
from utils import to_color

logger = logging.getLogger(__name__)


class QRCode:
    """A finished byte mode QR Code symbol

    Everything is computed on construction. Pass a version or a mask pattern to
    force them, otherwise the smallest fitting version and the mask with the
    lowest penalty are chosen.
    """

    _version: int | None = None
    size: int | None = None
    error_correction_level: ErrorCorrection
    _mask_pattern: MaskPattern | None = None
    _generated: bool = False
    segment: Segment
    modules: BitMatrix

    def __init__(
        self,
        data: str | bytes | bytearray | list[int] | None,
        version: int | None = None,
        error_correction_level: ErrorCorrection = ErrorCorrection.MEDIUM,
        mask_pattern: int | None = None,
    ):
        if data is None or len(data) == 0:
            raise EmptyInputError()

        self.segment = Segment(data)
        self.error_correction_level = error_correction_level
        # size is automatically set when version is updated
        self.version = version
        self.mask_pattern = mask_pattern

        self.generate()

    @property
    def version(self) -> int | None:
        return self._version

    @version.setter
    def version(self, version: int | None) -> None:
        self._check_not_generated("version")
        if version is None:
            self._version = version
            self.size = None
        else:
            check_version(version)
            self._version = version
            self.size = (4 * version) + 17

    @property
    def mask_pattern(self) -> MaskPattern | None:
        return self._mask_pattern

    @mask_pattern.setter
    def mask_pattern(self, mask_pattern: int | None) -> None:
        self._check_not_generated("mask_pattern")
        if mask_pattern is None:
            self._mask_pattern = mask_pattern
        elif 0 <= mask_pattern <= 7:
            self._mask_pattern = MaskPattern(mask_pattern)
        else:
            raise ValueError(f"Cannot set mask pattern {mask_pattern}. Expected to be None (auto) or an integer 0-7")

    def _check_not_generated(self, name: str) -> None:
        # The modules are only valid for the version and mask they were built with
        if self._generated:
            raise AttributeError(f"Cannot change {name} of a generated QR Code. Create a new QRCode instead")

    def generate(self) -> None:
        best_version = get_best_version_for_data(self.segment, self.error_correction_level)
        if best_version is None:
            raise CapacityExceededError(self.segment.get_length(), self.error_correction_level.name)

        if self.version is None:
            self.version = best_version
        elif self.version < best_version:
            raise VersionTooSmallError(self.version, best_version)

        assert self.version is not None and self.size is not None
        logger.info(
            "Encoding %d bytes as version %d (%dx%d) with error correction level %s",
            self.segment.get_length(),
            self.version,
            self.size,
            self.size,
            self.error_correction_level.name,
        )

        codewords = create_data(self.version, self.error_correction_level, self.segment)

        self.modules = BitMatrix(self.size)
        drawer = QRCodeDrawer(self.modules)
        drawer.add_finder_patterns()
        drawer.add_separators()
        drawer.add_alignment_patterns(self.version)
        drawer.add_timing_patterns()
        drawer.add_dark_module()
        drawer.reserve_format_information_area()
        drawer.add_version_information(self.version)
        drawer.push_bytes(codewords)

        if self.mask_pattern is None:
            self.mask_pattern = get_best_mask(
                self.modules,
                lambda pattern: drawer.add_format_information(self.error_correction_level, pattern),
            )
        assert self.mask_pattern is not None

        apply_mask(self.mask_pattern, self.modules)
        drawer.add_format_information(self.error_correction_level, self.mask_pattern)
        logger.info("Applied mask pattern %d", self.mask_pattern)
        self._generated = True

    def as_rows(self) -> list[list[bool]]:
        return self.modules.as_rows()

    def to_image(self, border: int = 4, scale: int = 1) -> Image.Image:
        """1 bit image with dark modules black and a light quiet zone of border modules"""
        _check_render_arguments(border, scale)

        width = self.modules.size + 2 * border
        # In mode "1", 0 is black and 1 is white
        img = Image.new(mode="1", size=(width, width), color=1)
        pixels = img.load()

        if pixels is None:
            raise RuntimeError("Unable to create image")

        for row in range(self.modules.size):
            for col in range(self.modules.size):
                pixels[col + border, row + border] = 0 if self.modules.get(row, col) else 1

        if scale > 1:
            img = img.resize((width * scale, width * scale), Image.Resampling.NEAREST)

        return img

    def to_color_image(self, border: int = 4, scale: int = 1) -> Image.Image:
        _check_render_arguments(border, scale)

        width = self.modules.size + 2 * border
        img = Image.new(mode="RGB", size=(width, width), color=WHITE)
        pixels = img.load()

        if pixels is None:
            raise RuntimeError("Unable to create image")

        for row in range(self.modules.size):
            for col in range(self.modules.size):
                pixels[col + border, row + border] = to_color(self.modules.get(row, col))

        if scale > 1:
            img = img.resize((width * scale, width * scale), Image.Resampling.NEAREST)

        return img

    def write_to_png(self, file_name: str | None = None, destination_folder: str | None = None, border: int = 4, scale: int = 1) -> str:
        file_path = _prepare_destination(file_name or "qrcode.png", destination_folder)
        self.to_color_image(border=border, scale=scale).save(file_path, format="PNG")
        return file_path

    def write_to_bmp(self, file_name: str | None = None, destination_folder: str | None = None, border: int = 4, scale: int = 1) -> str:
        file_path = _prepare_destination(file_name or "qrcode.bmp", destination_folder)
        self.to_image(border=border, scale=scale).save(file_path, format="BMP")
        return file_path

    def to_data_url(self, border: int = 4, scale: int = 1) -> str:
        buffer = io.BytesIO()
        self.to_image(border=border, scale=scale).save(buffer, format="BMP")
        return f"data:image/bmp;base64,{base64.b64encode(buffer.getvalue()).decode('ascii')}"

    @override
    def __str__(self) -> str:
        rows: list[str] = []
        for row in self.modules.data:
            rows.append("".join([str(v) for v in row]))
        return "".join(rows)

    @override
    def __repr__(self) -> str:
        return f"<QRCode version={self.version} error_correction_level={self.error_correction_level.name} mask_pattern={self.mask_pattern}>"


def _check_render_arguments(border: int, scale: int) -> None:
    if border < 0 or scale < 1:
        raise ValueError(f"Cannot render with a border of {border} and a scale of {scale}")


def _prepare_destination(file_name: str, destination_folder: str | None) -> str:
    destination_folder = destination_folder or "out"
    file_path = os.path.join(destination_folder, file_name)

    if os.path.exists(destination_folder) and not os.path.isdir(destination_folder):
        raise NotADirectoryError(f"Destination folder ({destination_folder}) appears to be a file. It must be deleted or destination_folder must be changed so a folder can be created")
    elif os.path.exists(file_path) and not os.path.isfile(file_path):
        raise IsADirectoryError(f"Destination path ({file_path}) appears to be a directory. It must be deleted or either destination_folder or file_name must be changed so a file can be created")

    os.makedirs(destination_folder, exist_ok=True)

    return file_path


def create_symbol(
    data: str | bytes | bytearray | list[int] | None,
    version: int | None = None,
    error_correction_level: ErrorCorrection = ErrorCorrection.MEDIUM,
    mask_pattern: int | None = None,
) -> QRCode:
    return QRCode(data, version=version, error_correction_level=error_correction_level, mask_pattern=mask_pattern)
