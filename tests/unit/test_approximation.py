"""
Тесты для модуля Approximation

Проверяемые инварианты:
1. quick_derivative делит на отношение x_hi / x_lo, а не на разность
2. quick_integral интегрирует по возрастающему интервалу (перестановка границ)
3. Последний укороченный шаг считается с полным resolution
4. Деление в производной по IEEE-754 (без исключений)
5. Параметры, при которых цикл не завершится, отклоняются
"""

import logging
import math

import pytest

from src.genmath.domain import NumericKindError
from src.genmath.math.approximation import quick_derivative, quick_integral

# =============================================================================
# ТЕСТЫ QUICK_DERIVATIVE
# =============================================================================


class TestQuickDerivative:
    """Тесты для quick_derivative"""

    def test_ratio_denominator(self) -> None:
        """f(x) = x в точке 5: (6 - 4) / (6 / 4) ≈ 1.333, а не 1"""
        result = quick_derivative(5, 1, lambda x: x)
        assert result == pytest.approx(2 / 1.5)
        assert result != pytest.approx(1.0)

    def test_float_operands(self) -> None:
        """Тот же результат для float"""
        assert quick_derivative(5.0, 1.0, lambda x: x) == pytest.approx(4 / 3)

    def test_quadratic(self) -> None:
        """f(x) = x² в точке 10 с шагом 0.5"""
        result = quick_derivative(10.0, 0.5, lambda x: x * x)
        expected = (10.5**2 - 9.5**2) / (10.5 / 9.5)
        assert result == pytest.approx(expected)

    def test_at_origin(self) -> None:
        """at == 0: знаменатель равен -1"""
        assert quick_derivative(0.0, 1.0, lambda x: x) == -2.0

    def test_at_equals_resolution(self) -> None:
        """x_lo == 0: знаменатель бесконечен, наклон 0 без исключения"""
        assert quick_derivative(1.0, 1.0, lambda x: x) == 0.0
        assert quick_derivative(1, 1, lambda x: x) == 0.0

    def test_samples_symmetric_points(self) -> None:
        """Формула вызывается ровно в at ± resolution"""
        samples = []

        def formula(x: float) -> float:
            samples.append(x)
            return x

        quick_derivative(3.0, 0.25, formula)
        assert sorted(samples) == [2.75, 3.25]

    def test_nan_propagates(self) -> None:
        """NaN из формулы пропагирует"""
        assert math.isnan(quick_derivative(2.0, 1.0, lambda x: float("nan")))

    def test_non_real_rejected(self) -> None:
        """Нечисловые аргументы отклоняются"""
        with pytest.raises(NumericKindError):
            quick_derivative("5", 1, lambda x: x)


# =============================================================================
# ТЕСТЫ QUICK_INTEGRAL
# =============================================================================


class TestQuickIntegral:
    """Тесты для quick_integral"""

    def test_constant_exact(self) -> None:
        """f(x) = 1 на [0, 10] с шагом 1 — ровно 10"""
        assert quick_integral(0, 10, 1, lambda x: 1) == 10

    def test_linear_exact(self) -> None:
        """Трапеции точны для линейной функции"""
        assert quick_integral(0, 4, 1, lambda x: x) == 8.0
        assert quick_integral(0.0, 4.0, 0.5, lambda x: 2 * x + 1) == 20.0

    def test_swapped_bounds_positive(self) -> None:
        """from_ > to: границы меняются, знак не инвертируется"""
        assert quick_integral(10, 0, 1, lambda x: 1) == 10
        assert quick_integral(4, 0, 1, lambda x: x) == quick_integral(0, 4, 1, lambda x: x)

    def test_sign_follows_function(self) -> None:
        """Знак результата определяется формулой"""
        assert quick_integral(0, 2, 1, lambda x: -1) == -2.0

    def test_tail_step_uses_full_resolution(self) -> None:
        """Укороченный последний шаг считается с полным resolution"""
        result = quick_integral(0, 2.5, 1, lambda x: 1)
        assert result == 3.0
        assert result != 2.5

    def test_degenerate_interval(self) -> None:
        """from_ == to: один шаг, resolution * f(to)"""
        assert quick_integral(3, 3, 0.5, lambda x: 4) == 2.0

    def test_sine_half_period(self) -> None:
        """∫ sin на [0, π] ≈ 2"""
        steps = 1000
        result = quick_integral(0.0, math.pi, math.pi / steps, math.sin)
        assert result == pytest.approx(2.0, abs=1e-3)

    def test_tail_sample_at_upper_bound(self) -> None:
        """Последний отсчёт берётся ровно в to"""
        samples = []

        def formula(x: float) -> float:
            samples.append(x)
            return 0.0

        quick_integral(0.0, 2.5, 1.0, formula)
        assert max(samples) == 2.5

    @pytest.mark.parametrize("resolution", [0, -1.0, float("nan")])
    def test_non_positive_resolution_rejected(self, resolution: float) -> None:
        """resolution <= 0 или NaN зациклил бы интегрирование"""
        with pytest.raises(ValueError, match="resolution must be positive"):
            quick_integral(0, 1, resolution, lambda x: x)

    @pytest.mark.parametrize("bounds", [(0, float("inf")), (float("-inf"), 0), (float("nan"), 1)])
    def test_non_finite_bounds_rejected(self, bounds: tuple) -> None:
        """Бесконечные и NaN границы отклоняются"""
        with pytest.raises(ValueError, match="finite"):
            quick_integral(bounds[0], bounds[1], 1, lambda x: x)

    def test_unrepresentable_integer_bounds_rejected(self) -> None:
        """int вне диапазона float64 отклоняется как ValueError, а не OverflowError"""
        with pytest.raises(ValueError, match="finite"):
            quick_integral(0, 10**400, 10**399, lambda x: x)

    def test_absorbed_resolution_rejected(self) -> None:
        """Шаг, поглощаемый точностью float, не продвигает цикл"""
        with pytest.raises(ValueError, match="too small"):
            quick_integral(1e20, 1e20 + 1e6, 1.0, lambda x: 1.0)

    def test_logs_step_count(self, caplog: pytest.LogCaptureFixture) -> None:
        """Число шагов пишется в DEBUG лог"""
        caplog.set_level(logging.DEBUG, logger="src.genmath.math.approximation")
        quick_integral(0, 10, 1, lambda x: 1)
        assert any("10 steps" in record.getMessage() for record in caplog.records)
