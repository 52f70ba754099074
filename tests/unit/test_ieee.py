"""
Тесты для модуля IEEE

Проверяет:
1. Деление на ноль по IEEE-754 (±Inf, NaN) без исключений
2. fmod/pow/log на краях области определения
3. Отсутствие RuntimeWarning от numpy
4. Epsilon-сравнения float
"""

import math
import warnings

import pytest

from src.genmath.math.ieee import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    ieee_divide,
    ieee_fmod,
    ieee_log,
    ieee_pow,
    is_close,
    is_valid_float,
)

# =============================================================================
# ТЕСТЫ IEEE-АРИФМЕТИКИ
# =============================================================================


class TestIeeeDivide:
    """Тесты для ieee_divide"""

    def test_normal_division(self) -> None:
        """Обычное деление"""
        assert ieee_divide(6.0, 4.0) == 1.5
        assert ieee_divide(-9, 3) == -3.0

    def test_division_by_zero_is_infinite(self) -> None:
        """x / 0 == ±Inf, а не ZeroDivisionError"""
        assert ieee_divide(1.0, 0.0) == math.inf
        assert ieee_divide(-1.0, 0.0) == -math.inf
        assert ieee_divide(1.0, -0.0) == -math.inf

    def test_zero_by_zero_is_nan(self) -> None:
        """0 / 0 == NaN"""
        assert math.isnan(ieee_divide(0.0, 0.0))

    def test_nan_propagates(self) -> None:
        """NaN пропагирует"""
        assert math.isnan(ieee_divide(math.nan, 2.0))
        assert math.isnan(ieee_divide(math.inf, math.inf))

    def test_returns_python_float(self) -> None:
        """Результат — float, а не numpy.float64"""
        assert type(ieee_divide(1, 2)) is float


class TestIeeeFmod:
    """Тесты для ieee_fmod"""

    def test_sign_follows_value(self) -> None:
        """Знак результата следует делимому"""
        assert ieee_fmod(7.0, 3.0) == 1.0
        assert ieee_fmod(-7.0, 3.0) == -1.0
        assert ieee_fmod(7.0, -3.0) == 1.0

    def test_zero_divisor_is_nan(self) -> None:
        """fmod(x, 0) == NaN, а не ValueError"""
        assert math.isnan(ieee_fmod(7.0, 0.0))

    def test_infinite_divisor(self) -> None:
        """fmod(x, Inf) == x"""
        assert ieee_fmod(5.5, math.inf) == 5.5


class TestIeeePowLog:
    """Тесты для ieee_pow и ieee_log"""

    def test_pow(self) -> None:
        """Степень"""
        assert ieee_pow(2.0, 10.0) == 1024.0
        assert ieee_pow(4.0, 0.5) == 2.0

    def test_pow_edges(self) -> None:
        """NaN вне области, Inf при переполнении"""
        assert math.isnan(ieee_pow(-8.0, 1.0 / 3.0))
        assert ieee_pow(10.0, 400.0) == math.inf
        assert ieee_pow(0.0, -1.0) == math.inf

    def test_log(self) -> None:
        """Натуральный логарифм"""
        assert ieee_log(1.0) == 0.0
        assert ieee_log(math.e) == pytest.approx(1.0)

    def test_log_edges(self) -> None:
        """log(0) == -Inf, log(x < 0) == NaN"""
        assert ieee_log(0.0) == -math.inf
        assert math.isnan(ieee_log(-1.0))

    def test_no_runtime_warnings(self) -> None:
        """Краевые случаи не порождают предупреждений numpy"""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            ieee_divide(1.0, 0.0)
            ieee_divide(0.0, 0.0)
            ieee_fmod(1.0, 0.0)
            ieee_pow(-8.0, 0.5)
            ieee_pow(10.0, 400.0)
            ieee_log(0.0)
            ieee_log(-1.0)


# =============================================================================
# ТЕСТЫ ПРОВЕРОК FLOAT
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_normal_values_valid(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1.5)
        assert is_valid_float(1e308)

    def test_nan_invalid(self) -> None:
        """NaN невалиден"""
        assert not is_valid_float(math.nan)

    def test_inf_invalid(self) -> None:
        """Inf невалиден"""
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)


class TestIsClose:
    """Тесты для is_close"""

    def test_defaults(self) -> None:
        """Толерантности по умолчанию"""
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_close_values_within_tolerance(self) -> None:
        """Близкие значения в пределах толерантности"""
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(0.1 + 0.2, 0.3)

    def test_far_values_not_close(self) -> None:
        """Далёкие значения не близки"""
        assert not is_close(1.0, 1.1)

    def test_small_absolute_difference(self) -> None:
        """Абсолютная толерантность вблизи нуля"""
        assert is_close(0.0, 1e-13)
        assert not is_close(0.0, 1e-10)

    def test_nan_never_close(self) -> None:
        """NaN не близок ничему, даже себе"""
        assert not is_close(math.nan, math.nan)
