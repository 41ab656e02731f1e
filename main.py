import sys
from Shell.shell import main_loop


def main():
    try:
        status = main_loop()
    except KeyboardInterrupt:
        print()
        status = 130
    sys.exit(status)


if __name__ == "__main__":
    main()
