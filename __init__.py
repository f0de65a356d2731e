"""
TicTacToe
=========
A desktop TicTacToe game against a computer opponent, built with Tkinter.
The computer plays either random moves or a simple heuristic:
win if possible, block if needed, otherwise centre > corners > edges.

Whoever moves first plays X.
"""

__version__ = "1.0.0"
