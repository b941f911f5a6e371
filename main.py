"""主程序入口 - 拼接命令行参数，计算表达式并打印结果"""
import logging
import sys

from config.config import LOGGING_CONFIG, validate_config
from core import ExpressionError, calculate
from utils.text import join_arguments, remove_whitespace

logger = logging.getLogger(__name__)


def main(argv=None):
    """
    Args:
        argv: 参数列表（不含程序名）；None 时读取 sys.argv
    Returns:
        进程退出码
    """
    # 没有选项参数：'-5+3' 这类以 '-' 开头的参数本身就是表达式，所以不用 argparse
    if argv is None:
        argv = sys.argv[1:]

    expression = remove_whitespace(join_arguments(argv))
    logger.debug(f"Expression: {expression!r}")

    try:
        result = calculate(expression)
    except ExpressionError as e:
        logger.error(f"Error evaluating expression '{expression}': {e}")
        return 1

    print(result)
    return 0


def run():
    validate_config()
    # 设置日志
    logging.basicConfig(
        level=LOGGING_CONFIG["level"],
        format=LOGGING_CONFIG["format"]
    )
    sys.exit(main())


if __name__ == "__main__":
    run()
