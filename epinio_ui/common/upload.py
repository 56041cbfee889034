"""
File upload into a browser file input.

The archive is shipped to the page base64 encoded and turned into a File
there, so it works the same against a local or a remote WebDriver.
"""

import base64
import logging
import os

from epinio_ui import config

logger = logging.getLogger("epinio_ui")

ATTACH_SCRIPT = """
const [input, name, data, type] = arguments;
const bytes = Uint8Array.from(atob(data), (c) => c.charCodeAt(0));
const transfer = new DataTransfer();
transfer.items.add(new File([bytes], name, {type: type}));
input.files = transfer.files;
input.dispatchEvent(new Event('change', {bubbles: true}));
"""


def encode_file(path: str) -> str:
    """Return the base64 encoded content of ``path``."""
    with open(path, "rb") as fixture:
        return base64.b64encode(fixture.read()).decode("ascii")


def attach_file(driver, element, path: str, mime_type: str = config.UPLOAD_MIME_TYPE):
    """Inject the file at ``path`` into the file input ``element``."""
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Upload fixture not found: {path}")
    name = os.path.basename(path)
    logger.info("Attaching %s as %s", name, mime_type)
    driver.execute_script(ATTACH_SCRIPT, element, name, encode_file(path), mime_type)
