from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Sequence
import numpy as np

from ai_lab.utils.logger import get_logger

logger = get_logger(__name__)


class BaseModel(ABC):
    """
    Abstract base class for all trend models.
    Defines a unified interface and shared model parameter handling.
    """

    def __init__(self, model_params: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize model with parameters and set up logging.

        Args:
            model_params (Optional[Dict[str, Any]]): Configuration dictionary for the model.
        """
        self.model_params = model_params or {}
        self.logger = logger

    @abstractmethod
    def train(self, y: Sequence[float]) -> None:
        """
        Fit the model on an ordered series of values.

        Args:
            y (Sequence[float]): Target values, one per position index.
        """
        raise NotImplementedError("Subclasses must implement 'train'")

    @abstractmethod
    def predict(self, x: Sequence[float]) -> np.ndarray:
        """
        Generate predictions at the given position indices.

        Args:
            x (Sequence[float]): Position indices to evaluate.

        Returns:
            np.ndarray: Predicted values.
        """
        raise NotImplementedError("Subclasses must implement 'predict'")

    def get_params(self) -> Dict[str, Any]:
        """
        Return the model's configuration parameters.

        Returns:
            Dict[str, Any]: Model configuration.
        """
        return self.model_params.copy()
