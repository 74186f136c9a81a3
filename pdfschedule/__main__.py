"""
Package entry point.

Allows running the application via:

    python -m pdfschedule timetable.pdf

This simply forwards execution to pdfschedule.cli.main().
"""

from pdfschedule.cli import main

if __name__ == "__main__":
    main()
