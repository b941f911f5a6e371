"""utils/text.py"""


def join_arguments(args):
    """把命令行参数用单个空格拼接成一个字符串"""
    return ' '.join(args)


def remove_whitespace(text):
    """删除所有空白字符（不是合并），因此 '2 3+4' 与 '23+4' 等价"""
    return ''.join(text.split())
