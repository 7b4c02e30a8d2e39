"""
scalar activation functions using numpy
author: jack collins
"""

# imports
import numpy as np


def relu(x: float) -> float:
    """
    computes the Rectified Linear Unit (ReLU) activation function.

    ReLU outputs the input value directly if it is positive;
    otherwise, returns 0. it's used in neural networks to introduce
    non-linearity while maintaining efficient gradient propagation.

    Parameters
    ----------
        x (float): Input value.

    Returns
    -------
        float: x if x > 0, else 0.0. NaN also maps to 0.0, since
        the comparison is false.
    """
    return float(x) if x > 0.0 else 0.0


def sigmoid(x: float) -> float:
    """
    compute the sigmoid function for a given input x.

    Parameters
    ----------
    x : float
        the input value for which the sigmoid function will be computed.

    Returns
    -------
    float
        the sigmoid function value for the given input, in [0, 1].
        very negative inputs overflow exp(-x) to inf and give 0.0.
    """
    with np.errstate(over="ignore"):
        return float(1.0 / (1.0 + np.exp(-x)))


def hyperbolic_tangent(x: float) -> float:
    """compute the hyperbolic tangent of x."""
    return float(np.tanh(x))


def leaky_relu(x: float, a: float) -> float:
    """
    computes the leaky ReLU activation function.

    like ReLU, but non-positive inputs are scaled by the slope ``a``
    instead of being zeroed, so negative inputs keep a non-zero gradient.

    Parameters
    ----------
        x (float): Input value.
        a (float): Slope for the non-positive region. not validated,
            negative or > 1 values are used as given.

    Returns
    -------
        float: x if x > 0, else a * x.
    """
    return float(x if x > 0.0 else a * x)
