# Comment Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Hash utilities.

MD5 is only used to fingerprint source files and comment records in batch
files. It is not used for cryptographic security.
"""

from pathlib import Path
import hashlib

from comment_analyzer.comments.line_parser import ParsedComment


def _md5() -> hashlib._Hash:
    # FIPS-enabled OpenSSL builds reject MD5 unless flagged as non-security use.
    try:
        return hashlib.md5(usedforsecurity=False)  # type: ignore[call-arg]
    except TypeError:
        return hashlib.md5()


def md5_file(path: Path) -> str:
    """Return the lowercase hex MD5 digest of a file."""

    hasher = _md5()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(1024 * 1024), b""):
            hasher.update(chunk)

    return hasher.hexdigest()


def comment_fingerprint(comment: ParsedComment) -> str:
    """Return a stable identifier for a parsed comment.

    Identical platform/username/text triples share a fingerprint.
    """

    hasher = _md5()
    hasher.update("\x1f".join((comment.platform, comment.username, comment.text)).encode("utf-8"))
    return hasher.hexdigest()
