"""
Algebra Drill — Entry point.

Launch the Tkinter desktop application.
"""

from gui.app import main

if __name__ == "__main__":
    main()
