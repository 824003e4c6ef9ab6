import sys

from kv_log import Logger, LoggerFunc, OK, StdLogger, setup_logging

# One frame for this module's helper, one for the caller of StdLogger.log.
_std = StdLogger(2)


def log(*keyvals):
    return _std.log(*keyvals)


class Worker:
    def __init__(self, logger: Logger):
        self.logger = logger

    def run(self, job):
        self.logger.log("msg", "job started", "job", job)


def main():
    setup_logging(stream=sys.stdout)
    log("msg", "attributed to main, not to log()")

    seen = []
    Worker(LoggerFunc(lambda *kv: seen.append(kv) or OK)).run("a1")
    print("captured:", seen)

    Worker(StdLogger(1)).run("b2")


if __name__ == "__main__":
    main()
