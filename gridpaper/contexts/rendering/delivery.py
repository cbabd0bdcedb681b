"""
Output Delivery

Copies the compiled PDF to its destination: a file path, or stdout when the
destination is "-".
"""

import os
import shutil
import sys
from pathlib import Path
from typing import BinaryIO, Optional, Union

from gridpaper.contexts.rendering.exceptions import DeliveryError
from gridpaper.contexts.rendering.logger import _log_debug, _log_info

STDOUT_DESTINATION = "-"


def deliver_pdf(
    pdf_path: Path,
    destination: Union[str, Path],
    stream: Optional[BinaryIO] = None,
) -> None:
    """
    Copy the compiled PDF to its destination.

    A regular destination is created or overwritten and fsynced before
    returning. A failure part way through may leave a truncated file behind.
    For "-", the bytes are written unmodified to stream (default: the binary
    buffer of sys.stdout) and flushed.

    Args:
        pdf_path: Compiled PDF inside the workspace
        destination: Output path, or "-" for stdout
        stream: Binary stream used for "-" (default: sys.stdout.buffer)

    Raises:
        DeliveryError: If reading the PDF or writing the destination fails
    """
    if str(destination) == STDOUT_DESTINATION:
        out = stream if stream is not None else sys.stdout.buffer
        try:
            with open(pdf_path, "rb") as src:
                shutil.copyfileobj(src, out)
            out.flush()
        except OSError as e:
            raise DeliveryError(f"copy pdf file: {e}") from e
        _log_debug("Wrote PDF to stdout")
        return

    destination = Path(destination)
    try:
        with open(pdf_path, "rb") as src, open(destination, "wb") as dst:
            shutil.copyfileobj(src, dst)
            dst.flush()
            os.fsync(dst.fileno())
    except OSError as e:
        raise DeliveryError(f"copy pdf file: {e}") from e
    _log_info(f"PDF saved to: {destination}")
