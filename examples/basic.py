import io, sys

from kv_log import Pair, StdLogger, init, setup_logging, substitute


def main():
    setup_logging(stream=sys.stdout)
    logger = init(1)

    logger.log("msg", "the message")
    logger.log("msg", "the message", "p1", 1, "lvl", "error")
    logger.log("msg", "the message", "p1", 1, "lvl", "warn", "p2", "param 2")
    logger.log("msg", "the message", "p1", sys.stderr, "p2", 2)
    logger.log("msg", "request done", Pair("status", 200), {"path": "/health", "ms": 3})

    # same event, unencodable value written as error text instead of dropped
    StdLogger(1, policy=substitute).log("msg", "the message", "p1", io.BytesIO(), "p2", 2)


if __name__ == "__main__":
    main()
