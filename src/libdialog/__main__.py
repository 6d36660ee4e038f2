"""
LibDialog demo entry point.
"""

from libdialog.core.application import main

if __name__ == '__main__':
    main()
