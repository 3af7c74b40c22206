"""
Pytest configuration and fixtures for Autocrop tests
"""

from pathlib import Path

import cv2
import numpy as np
import pytest

from autocrop.core.image.loader import SourceImage
from autocrop.schemas.crop import CropConfig


def make_image(width: int = 4, height: int = 4, color=(0, 0, 0, 255)) -> np.ndarray:
    """Solid RGBA8 image"""
    image = np.zeros((height, width, 4), dtype=np.uint8)
    image[:, :] = color
    return image


def write_rgba(path: Path, image: np.ndarray) -> Path:
    """Write an RGBA8 image to disk with OpenCV"""
    cv2.imwrite(str(path), cv2.cvtColor(image, cv2.COLOR_RGBA2BGRA))
    return path


def read_rgba(path) -> np.ndarray:
    """Read a PNG written by the engine back as RGBA8"""
    image = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    assert image is not None, f"could not read {path}"
    return cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)


@pytest.fixture
def background():
    """4x4 opaque black background"""
    return make_image()


@pytest.fixture
def single_pixel_image(background):
    """Background with (2, 1) turned white"""
    image = background.copy()
    image[1, 2] = (255, 255, 255, 255)
    return image


@pytest.fixture
def scene():
    """
    Background plus two comparison images on a 10x8 canvas.

    Image 1 differs in a 2x2 block at x=2..3, y=1..2.
    Image 2 differs at the single pixel (6, 5).
    """
    bg = make_image(10, 8, (10, 20, 30, 255))
    first = bg.copy()
    first[1:3, 2:4] = (200, 0, 0, 255)
    second = bg.copy()
    second[5, 6] = (0, 200, 0, 255)
    return bg, first, second


@pytest.fixture
def scene_sources(scene, tmp_path):
    """Scene as SourceImage batch with fake source paths"""
    names = ["background.png", "first.png", "second.png"]
    return [SourceImage(path=tmp_path / name, image=img) for name, img in zip(names, scene)]


@pytest.fixture
def scene_files(scene, tmp_path):
    """Scene written to disk, returns the paths"""
    input_dir = tmp_path / "input"
    input_dir.mkdir()
    names = ["background.png", "first.png", "second.png"]
    return [write_rgba(input_dir / name, img) for name, img in zip(names, scene)]


@pytest.fixture
def output_dir(tmp_path):
    """Output directory for crop runs"""
    path = tmp_path / "output"
    path.mkdir()
    return path


@pytest.fixture
def crop_config(output_dir):
    """Default crop configuration writing to the output directory"""
    return CropConfig(output_path=output_dir)


@pytest.fixture
def read_png():
    """Reader for PNGs written by the engine"""
    return read_rgba


@pytest.fixture
def write_image():
    """Writer for RGBA8 test inputs"""
    return write_rgba
