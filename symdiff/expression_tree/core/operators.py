import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  BINARY_OP = 2
  UNARY_OP = 3

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  # Unary ops
  SIN = 4
  COS = 5
  EXP = 6
  LOG = 7

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV}
UNARY_OP_MAP = {'sin': OpType.SIN, 'cos': OpType.COS, 'exp': OpType.EXP, 'log': OpType.LOG}


def apply_binary_op(left_val, right_val, operator: str):
  """IEEE-754 binary operation on scalars or arrays; never raises on x/0"""
  with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
    if operator == '+':
      return np.add(left_val, right_val)
    elif operator == '-':
      return np.subtract(left_val, right_val)
    elif operator == '*':
      return np.multiply(left_val, right_val)
    elif operator == '/':
      return np.true_divide(left_val, right_val)
  raise ValueError(f"Unknown binary operator: {operator!r}")


def apply_unary_op(operand_val, operator: str):
  with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
    if operator == 'sin':
      return np.sin(operand_val)
    elif operator == 'cos':
      return np.cos(operand_val)
    elif operator == 'exp':
      return np.exp(operand_val)
    elif operator == 'log':
      return np.log(operand_val)
  raise ValueError(f"Unknown unary operator: {operator!r}")


@numba.njit(cache=True, inline='always')
def evaluate_constant(n_samples, value):
  return np.full(n_samples, value, dtype=np.float64)

# No fastmath here: inf and nan results must survive.
@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op_fast(left_val, right_val, op_type):
  if op_type == OpType.ADD:
    return left_val + right_val
  elif op_type == OpType.SUB:
    return left_val - right_val
  elif op_type == OpType.MUL:
    return left_val * right_val
  elif op_type == OpType.DIV:
    return left_val / right_val
  return np.full_like(left_val, np.nan)

@numba.njit(cache=True, error_model='numpy')
def evaluate_unary_op_fast(operand_val, op_type):
  if op_type == OpType.SIN:
    return np.sin(operand_val)
  elif op_type == OpType.COS:
    return np.cos(operand_val)
  elif op_type == OpType.EXP:
    return np.exp(operand_val)
  elif op_type == OpType.LOG:
    return np.log(operand_val)
  return np.full_like(operand_val, np.nan)
