import pytest

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger, LoguruIO
from src.platform.logging.loguru_io_config import MAX_LOGGED_CONTENT_LENGTH, custom_logger
from src.platform.logging.loguru_io_utils import normalize_args_kwargs, truncate_content


class TestLoggerIO:
    @pytest.mark.unit
    def test_passes_return_value_through(self) -> None:
        @Logger.io
        def add(a: int, b: int) -> int:
            return a + b

        assert add(1, 2) == 3
        assert add.__name__ == 'add'

    @pytest.mark.unit
    def test_reraises_by_default(self) -> None:
        @Logger.io
        def fail() -> None:
            raise ConflictError('taken')

        with pytest.raises(ConflictError, match='taken'):
            fail()

    @pytest.mark.unit
    def test_reraise_false_returns_none(self) -> None:
        @Logger.io(reraise=False)
        def fail() -> int:
            raise ValueError('boom')

        assert fail() is None

    @pytest.mark.unit
    def test_exception_is_marked_logged_once(self) -> None:
        @Logger.io
        def inner() -> None:
            raise ConflictError('taken')

        @Logger.io
        def outer() -> None:
            inner()

        with pytest.raises(ConflictError) as exc_info:
            outer()
        assert getattr(exc_info.value, '_has_logged', False) is True


class TestMaskSensitive:
    @pytest.mark.unit
    def test_masks_sensitive_keys_recursively(self) -> None:
        io = LoguruIO(custom_logger)
        masked = io.mask_sensitive({'user_name': 'Alice', 'auth': {'token': 'abc'}})
        assert masked == {'user_name': 'Alice', 'auth': {'token': '********'}}

    @pytest.mark.unit
    def test_keeps_sequence_type(self) -> None:
        io = LoguruIO(custom_logger)
        assert io.mask_sensitive(({'password': 'x'}, 1)) == ({'password': '********'}, 1)


class TestLoguruIOUtils:
    @pytest.mark.unit
    def test_truncate_content(self) -> None:
        long_value = 'x' * (MAX_LOGGED_CONTENT_LENGTH + 10)

        assert truncate_content('short') == 'short'
        truncated = truncate_content(long_value)
        assert truncated.startswith('x' * MAX_LOGGED_CONTENT_LENGTH)
        assert truncated.endswith(f'({MAX_LOGGED_CONTENT_LENGTH + 10} chars)')

    @pytest.mark.unit
    def test_normalize_drops_unknown_kwargs(self) -> None:
        def target(a: int, *, b: int) -> None: ...

        args, kwargs = normalize_args_kwargs(target, 1, 2, b=3, c=4)

        assert args == (1,)
        assert kwargs == {'b': 3}
