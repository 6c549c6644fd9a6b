import numpy as np
import pytest

from ai_lab.models.linear_trend_model import LinearTrendModel


class TestLinearTrendModel:
    """Closed-form least squares over position indices."""

    def test_perfect_line(self):
        model = LinearTrendModel()
        model.train([1, 2, 3, 4, 5])
        assert model.slope == 1.0
        assert model.intercept == 1.0

    def test_known_fit_with_noise(self):
        """y = [2, 4, 5, 4, 5] has slope 0.6 and intercept 2.8."""
        model = LinearTrendModel()
        model.train([2, 4, 5, 4, 5])
        assert model.slope == pytest.approx(0.6)
        assert model.intercept == pytest.approx(2.8)

    def test_matches_numpy_polyfit(self):
        values = [182.1, 183.5, 181.9, 184.2, 186.0, 185.2, 187.4]
        model = LinearTrendModel()
        model.train(values)
        slope, intercept = np.polyfit(np.arange(len(values)), values, 1)
        assert model.slope == pytest.approx(slope)
        assert model.intercept == pytest.approx(intercept)

    def test_empty_series_zero_fallback(self):
        model = LinearTrendModel()
        model.train([])
        assert model.slope == 0.0
        assert model.intercept == 0.0

    def test_single_value(self):
        model = LinearTrendModel()
        model.train([42.5])
        assert model.slope == 0.0
        assert model.intercept == 42.5

    def test_flat_series(self):
        model = LinearTrendModel()
        model.train([7.0] * 10)
        assert model.slope == 0.0
        assert model.intercept == 7.0

    def test_predict_vector_and_scalar(self):
        model = LinearTrendModel()
        model.train([1, 3, 5])
        np.testing.assert_allclose(model.predict([0, 1, 5]), [1.0, 3.0, 11.0])
        assert model.predict_at(3) == 7.0

    def test_get_params_reports_fit(self):
        model = LinearTrendModel(name="trend")
        model.train([1, 2])
        params = model.get_params()
        assert params["name"] == "trend"
        assert params["slope"] == 1.0
        assert params["intercept"] == 1.0
        assert params["n_samples"] == 2

    def test_input_not_mutated(self):
        values = [3.0, 1.0, 2.0]
        LinearTrendModel().train(values)
        assert values == [3.0, 1.0, 2.0]
