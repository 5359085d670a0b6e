import sys

from gui.apps.calculator_app import CalculatorApp


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    logger = print if '--verbose' in argv else None
    CalculatorApp(logger=logger).run()


if __name__ == '__main__':
    main()
