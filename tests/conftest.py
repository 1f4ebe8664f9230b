"""Test configuration and shared fixtures."""

import pytest

from simpl.core.ast import BinOp, Binop, BoolLit, If, IntLit, Let, Var

# (program text, expected value)
WELL_FORMED_PROGRAMS = [
    ("42", IntLit(42)),
    ("-7", IntLit(-7)),
    ("true", BoolLit(True)),
    ("2 + 3", IntLit(5)),
    ("4 * 5", IntLit(20)),
    ("2 <= 3", BoolLit(True)),
    ("5 <= 3", BoolLit(False)),
    ("1 + 2 * 3", IntLit(7)),
    ("(1 + 2) * 3", IntLit(9)),
    ("let x = 5 in x + 1", IntLit(6)),
    ("let x = 1 in let x = x + 10 in x * 2", IntLit(22)),
    ("let x = 2 in let y = x * x in let x = y + 1 in x + y", IntLit(9)),
    ("if 2 <= 3 then 10 else 20", IntLit(10)),
    ("if 3 <= 2 then 10 else 20", IntLit(20)),
    ("if true then 1 else true + 1", IntLit(1)),
    ("let b = 1 <= 0 in if b then false else true", BoolLit(True)),
    ("1 + let x = 2 in x * 3", IntLit(7)),
    ("(if 1 <= 2 then 3 else 4) * (let y = 5 in y + y)", IntLit(30)),
]


@pytest.fixture
def add_let() -> Let:
    """let x = 5 in x + 1"""
    return Let("x", IntLit(5), Binop(BinOp.ADD, Var("x"), IntLit(1)))


@pytest.fixture
def short_circuit_if() -> If:
    """if true then 1 else true + 1"""
    return If(BoolLit(True), IntLit(1), Binop(BinOp.ADD, BoolLit(True), IntLit(1)))
