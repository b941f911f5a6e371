"""配置文件"""
import logging

# 解析器参数
PARSER_CONFIG = {
    "decimal_separators": (".", ","),  # ',' 在解析前统一替换为 '.'
    "max_nesting_depth": 200,  # 括号嵌套上限，低于Python默认递归深度
}

# 求值器参数
EVALUATOR_CONFIG = {
    # False: 求值结束后栈中多于一个值时报错
    # True: 沿用旧行为，取栈底第一个值并忽略其余
    "allow_trailing_values": False,
}

# 日志参数
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert tuple(PARSER_CONFIG["decimal_separators"]) == (".", ","), "只支持 '.' 和 ',' 作为小数分隔符"
    assert PARSER_CONFIG["max_nesting_depth"] > 0, "max_nesting_depth must be positive"
    assert isinstance(EVALUATOR_CONFIG["allow_trailing_values"], bool)
    assert isinstance(logging.getLevelName(LOGGING_CONFIG["level"]), int), \
        f"unknown log level: {LOGGING_CONFIG['level']}"
