import sys

COLORS = {
    'red': '\033[91m',
    'green': '\033[92m',
    'yellow': '\033[93m',
    'reset': '\033[0m'
}

USAGE = ("Please provide the path using the following format:  "
         "ha-icon-js-builder -path=/config/www/myicons/")


def print_colored(text, color):
    if sys.platform == 'win32':
        print(text)
    else:
        print(f"{COLORS.get(color, '')}{text}{COLORS['reset']}")


def path_help():
    print(USAGE)
