"""Unit tests for Attachment construction."""
from __future__ import annotations

import base64
from pathlib import Path

import pytest

from postmark_client.application.email import DEFAULT_CONTENT_TYPE, Attachment, guess_content_type
from postmark_client.kernel.errors import (
    AttachmentError,
    AttachmentNotFoundError,
    AttachmentTooLargeError,
    EmptyAttachmentError,
)


class TestFromBytes:
    def test_encodes_base64(self) -> None:
        att = Attachment.from_bytes("hello.txt", "text/plain", b"hello world").unwrap()
        assert att.name == "hello.txt"
        assert att.content_type == "text/plain"
        assert base64.b64decode(att.content) == b"hello world"
        assert att.decode() == b"hello world"

    @pytest.mark.parametrize("data", [b"a", b"ab", b"abc", b"abcd", bytes(range(256))])
    def test_size_matches_decoded_length(self, data: bytes) -> None:
        assert Attachment.from_bytes("f.bin", None, data).unwrap().size == len(data)

    def test_empty_content_rejected(self) -> None:
        result = Attachment.from_bytes("empty.txt", "text/plain", b"")
        assert isinstance(result.unwrap_err(), EmptyAttachmentError)

    def test_empty_name_rejected(self) -> None:
        assert isinstance(Attachment.from_bytes("", "text/plain", b"x").unwrap_err(), AttachmentError)

    def test_content_type_inferred(self) -> None:
        att = Attachment.from_bytes("report.pdf", None, b"%PDF").unwrap()
        assert att.content_type == "application/pdf"

    def test_unknown_extension_falls_back(self) -> None:
        assert guess_content_type("blob.zzzunknown") == DEFAULT_CONTENT_TYPE

    def test_too_large(self) -> None:
        result = Attachment.from_bytes("big.bin", None, b"x" * 11, max_bytes=10)
        err = result.unwrap_err()
        assert isinstance(err, AttachmentTooLargeError)
        assert err.size == 11

    def test_content_id_prefixed(self) -> None:
        att = Attachment.from_bytes("logo.png", "image/png", b"\x89PNG", content_id="logo.png").unwrap()
        assert att.content_id == "cid:logo.png"

    def test_content_id_kept_when_prefixed(self) -> None:
        att = Attachment.from_bytes("logo.png", "image/png", b"\x89PNG", content_id="cid:logo").unwrap()
        assert att.content_id == "cid:logo"

    def test_repr_hides_content(self) -> None:
        att = Attachment.from_bytes("s.txt", "text/plain", b"secret-payload").unwrap()
        assert att.content not in repr(att)


class TestFromBase64:
    def test_valid(self) -> None:
        encoded = base64.b64encode(b"data").decode()
        att = Attachment.from_base64("d.txt", "text/plain", encoded).unwrap()
        assert att.content == encoded

    def test_invalid_base64(self) -> None:
        assert isinstance(Attachment.from_base64("d.txt", None, "!!not base64!!").unwrap_err(), AttachmentError)


class TestFromFile:
    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "upload.tmp"
        path.write_bytes(b"file contents")
        att = Attachment.from_file("invoice.pdf", path).unwrap()
        assert att.name == "invoice.pdf"
        assert att.content_type == "application/pdf"
        assert att.decode() == b"file contents"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = Attachment.from_file("x.txt", tmp_path / "missing.txt")
        assert isinstance(result.unwrap_err(), AttachmentNotFoundError)

    def test_directory_is_not_a_file(self, tmp_path: Path) -> None:
        assert isinstance(Attachment.from_file("x.txt", tmp_path).unwrap_err(), AttachmentNotFoundError)

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.txt"
        path.write_bytes(b"")
        assert isinstance(Attachment.from_file("empty.txt", path).unwrap_err(), EmptyAttachmentError)

    def test_too_large_file(self, tmp_path: Path) -> None:
        path = tmp_path / "big.bin"
        path.write_bytes(b"x" * 32)
        result = Attachment.from_file("big.bin", path, max_bytes=16)
        assert isinstance(result.unwrap_err(), AttachmentTooLargeError)

    @pytest.mark.parametrize("name", ["dir/file.txt", "dir\\file.txt"])
    def test_name_with_separator(self, tmp_path: Path, name: str) -> None:
        path = tmp_path / "f.txt"
        path.write_bytes(b"x")
        assert isinstance(Attachment.from_file(name, path).unwrap_err(), AttachmentError)


class TestDirectConstruction:
    @pytest.mark.parametrize("content", ["!!!!", "QUJD!", "QQ"])
    def test_invalid_base64_rejected(self, content: str) -> None:
        with pytest.raises(AttachmentError):
            Attachment(name="x.txt", content_type="text/plain", content=content)

    @pytest.mark.parametrize("content", ["", "===="])
    def test_empty_decoded_content_rejected(self, content: str) -> None:
        with pytest.raises(AttachmentError):
            Attachment(name="x.txt", content_type="text/plain", content=content)

    def test_blank_content_is_empty_attachment(self) -> None:
        with pytest.raises(EmptyAttachmentError):
            Attachment(name="x.txt", content_type="text/plain", content="")

    def test_size_is_decoded_length(self) -> None:
        att = Attachment(name="x.txt", content_type="", content=base64.b64encode(b"abcde").decode("ascii"))
        assert att.size == 5
        assert att.content_type == "text/plain"
