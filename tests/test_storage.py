import pytest

from uploader.storage import (
    NAME_ALPHABET,
    file_extension,
    generate_name,
    guess_content_type,
    storage_name,
    write_upload,
)


def test_generate_name_is_ten_alphanumerics():
    for _ in range(100):
        name = generate_name()
        assert len(name) == 10
        assert all(c in NAME_ALPHABET for c in name)


def test_generate_name_has_no_collisions_in_10000_draws():
    names = {generate_name() for _ in range(10_000)}
    assert len(names) == 10_000


@pytest.mark.parametrize(
    "filename,ext",
    [
        ("cat.png", "png"),
        ("archive.tar.gz", "gz"),
        ("Photo.JPG", "JPG"),
        ("README", ""),
        (".bashrc", ""),
        ("", ""),
        ("dir/sub/shot.webp", "webp"),
        ("C:\\Users\\me\\shot.bmp", "bmp"),
    ],
)
def test_file_extension(filename, ext):
    assert file_extension(filename) == ext


def test_storage_name_is_lowercase_with_extension():
    name = storage_name("Screen Shot.PNG")
    base, ext = name.rsplit(".", 1)
    assert ext == "png"
    assert len(base) == 10
    assert base.isalnum()
    assert name == name.lower()


def test_write_upload_overwrites_existing(media_root):
    (media_root / "same.png").write_bytes(b"old")
    out = write_upload(media_root, "same.png", b"new")
    assert out == media_root / "same.png"
    assert out.read_bytes() == b"new"


@pytest.mark.parametrize(
    "name,expected",
    [
        ("a.png", "image/png"),
        ("a.gif", "image/gif"),
        ("a.jpg", "image/jpeg"),
        ("a.html", "text/html"),
        ("a.zzqq", "text/plain"),
        ("noext.", "text/plain"),
    ],
)
def test_guess_content_type(name, expected):
    assert guess_content_type(name) == expected
