VERSION = (0, 0, 1)
VERSION_STR = ".".join(str(part) for part in VERSION)

ARGV0 = "picoarg"
DESCRIPTION = "A tiny short-flag command-line option parser"
DEBUG_ENV = "PICOARG_DEBUG"
