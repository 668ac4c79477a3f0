"""
Numeric interpretation of expression trees.

``evaluate`` walks the tree once per call and returns a Python float with
IEEE-754 semantics: dividing by zero gives an infinity or NaN, never an
exception. The only failure is a variable missing from the environment.
"""

import numpy as np
from typing import Any, Dict, Mapping

from .core.node import Node, ConstantNode, VariableNode, BinaryOpNode, UnaryOpNode
from .core.operators import (
  BINARY_OP_MAP, UNARY_OP_MAP, apply_binary_op, apply_unary_op,
  evaluate_constant, evaluate_binary_op_fast, evaluate_unary_op_fast
)


class UnboundVariableError(LookupError):
  """Raised when a variable has no value in the evaluation environment"""

  def __init__(self, name: str):
    super().__init__(f"uninitialized variable {name}")
    self.name = name


def _normalize_env(env: Mapping[Any, Any]) -> Dict[str, Any]:
  bindings = {}
  for key, value in env.items():
    name = key.name if isinstance(key, VariableNode) else key
    bindings[name] = value.value if isinstance(value, ConstantNode) else value
  return bindings


def evaluate(node: Node, env: Mapping[Any, Any]) -> float:
  """
  Evaluate ``node`` with variables looked up in ``env``.

  Keys may be names or VariableNode instances, values numbers or
  ConstantNode instances.

  Raises:
      UnboundVariableError: a variable in the tree is not bound in ``env``
  """
  return float(_evaluate(node, _normalize_env(env)))


def _evaluate(node: Node, env: Dict[str, Any]) -> np.float64:
  if isinstance(node, ConstantNode):
    return np.float64(node.value)
  if isinstance(node, VariableNode):
    try:
      return np.float64(env[node.name])
    except KeyError:
      raise UnboundVariableError(node.name) from None
  if isinstance(node, BinaryOpNode):
    left_val = _evaluate(node.left, env)
    right_val = _evaluate(node.right, env)
    return apply_binary_op(left_val, right_val, node.operator)
  if isinstance(node, UnaryOpNode):
    return apply_unary_op(_evaluate(node.operand, env), node.operator)
  raise TypeError(f"Cannot evaluate {type(node).__name__}")


def _batch_length(env: Dict[str, np.ndarray]) -> int:
  lengths = {values.shape[0] for values in env.values() if values.ndim == 1}
  if len(lengths) > 1:
    raise ValueError(f"Environment arrays have different lengths: {sorted(lengths)}")
  return lengths.pop() if lengths else 1


def evaluate_batch(node: Node, env: Mapping[Any, Any]) -> np.ndarray:
  """
  Vectorised evaluation over many points at once.

  Every environment value is a 1-D array (or a scalar, broadcast to the
  common length). Returns a float64 array with one entry per point.
  """
  arrays = {}
  for name, value in _normalize_env(env).items():
    values = np.asarray(value, dtype=np.float64)
    if values.ndim > 1:
      raise ValueError(f"Values for {name!r} must be scalar or 1-D, got shape {values.shape}")
    arrays[name] = values

  n_samples = _batch_length(arrays)
  for name, values in arrays.items():
    if values.ndim == 0:
      arrays[name] = np.full(n_samples, float(values), dtype=np.float64)
    else:
      arrays[name] = np.array(values, copy=True)
  return _evaluate_batch(node, arrays, n_samples)


def _evaluate_batch(node: Node, env: Dict[str, np.ndarray], n_samples: int) -> np.ndarray:
  if isinstance(node, ConstantNode):
    return evaluate_constant(n_samples, node.value)
  if isinstance(node, VariableNode):
    try:
      return env[node.name]
    except KeyError:
      raise UnboundVariableError(node.name) from None
  if isinstance(node, BinaryOpNode):
    left_val = _evaluate_batch(node.left, env, n_samples)
    right_val = _evaluate_batch(node.right, env, n_samples)
    return evaluate_binary_op_fast(left_val, right_val, int(BINARY_OP_MAP[node.operator]))
  if isinstance(node, UnaryOpNode):
    operand_val = _evaluate_batch(node.operand, env, n_samples)
    return evaluate_unary_op_fast(operand_val, int(UNARY_OP_MAP[node.operator]))
  raise TypeError(f"Cannot evaluate {type(node).__name__}")
