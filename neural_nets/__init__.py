from neural_nets.activations import hyperbolic_tangent, leaky_relu, relu, sigmoid

__all__ = ["relu", "sigmoid", "hyperbolic_tangent", "leaky_relu"]
