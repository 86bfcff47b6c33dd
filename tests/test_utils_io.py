from unittest.mock import MagicMock

import pytest
from b2_client.utils.io import FilePartReader, TqdmIOWrapper
from tqdm.auto import tqdm


@pytest.fixture
def test_file(tmp_path):
    path = tmp_path / "test_file.bin"
    path.write_bytes(bytes(range(256)) * 4)
    return path


class TestFilePartReader:
    def test_reads_range(self, test_file):
        with FilePartReader(test_file, offset=10, length=20) as part:
            assert part.read() == (bytes(range(256)) * 4)[10:30]
            assert part.read() == b""

    def test_default_length_is_rest_of_file(self, test_file):
        with FilePartReader(test_file, offset=1000) as part:
            assert len(part) == 24
            assert part.read() == (bytes(range(256)) * 4)[1000:]

    @pytest.mark.parametrize("chunk_size", [1, 7, 100], ids=["tiny_chunks", "odd_chunks", "large_chunks"])
    def test_chunked_reads(self, test_file, chunk_size):
        expected = (bytes(range(256)) * 4)[256:512]
        chunks = []
        with FilePartReader(test_file, offset=256, length=256) as part:
            while chunk := part.read(chunk_size):
                chunks.append(chunk)

        assert b"".join(chunks) == expected
        assert all(len(chunk) <= chunk_size for chunk in chunks)

    def test_len_and_tell(self, test_file):
        with FilePartReader(test_file, offset=0, length=100) as part:
            assert len(part) == 100
            assert part.tell() == 0
            part.read(30)
            assert len(part) == 100
            assert part.tell() == 30

    def test_empty_range(self, test_file):
        with FilePartReader(test_file, offset=1024, length=0) as part:
            assert len(part) == 0
            assert part.read() == b""

    @pytest.mark.parametrize(
        "offset,length",
        [(-1, 10), (0, -1), (1025, None), (1000, 25), (0, 1025)],
    )
    def test_invalid_range(self, test_file, offset, length):
        with pytest.raises(ValueError):
            FilePartReader(test_file, offset=offset, length=length)

    def test_close(self, test_file):
        part = FilePartReader(test_file, offset=0, length=10)
        part.close()
        assert part.closed


class TestTqdmIOWrapper:
    def test_progress_updated(self, test_file):
        pbar = MagicMock()
        with TqdmIOWrapper(FilePartReader(test_file, offset=0, length=100), pbar) as wrapped:
            assert len(wrapped) == 100
            while wrapped.read(33):
                pass
            assert wrapped.tell() == 100

        assert [c.args[0] for c in pbar.update.call_args_list] == [33, 33, 33, 1]

    def test_close_closes_wrapped(self, test_file):
        part = FilePartReader(test_file, offset=0, length=10)
        wrapped = TqdmIOWrapper(part, tqdm(total=10, disable=True))
        wrapped.close()

        assert part.closed
        assert wrapped.closed
