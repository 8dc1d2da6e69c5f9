"""
The MODEL layer contains the calculator state machine and number formatting.
It has NO knowledge of the GUI (Qt).
"""
from pocketcalc.model.engine import CalculatorEngine, EngineState, InputKind, Operation

__all__ = ["CalculatorEngine", "EngineState", "InputKind", "Operation"]
