"""配置文件"""

# 表达式求值参数
CALCULATOR_CONFIG = {
    "allow_partial": True,  # 栈中剩余多个值时只取栈顶，不报错
    "token_separator": ", ",  # RPN显示时的分隔符
}

# 交互式REPL
REPL_CONFIG = {
    "prompt": "> ",
    "exit_commands": ("quit", "exit"),
}

# 批量求值
BATCH_CONFIG = {
    "cache_size": 1000,  # LRU结果缓存大小
    "expression_column": "expression",  # CSV输入中表达式所在的列
    "output_columns": ["expression", "rpn", "result", "error"],
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert BATCH_CONFIG["cache_size"] > 0, "缓存大小必须为正数"
    assert CALCULATOR_CONFIG["token_separator"], "分隔符不能为空"
    assert REPL_CONFIG["prompt"], "提示符不能为空"
    assert BATCH_CONFIG["expression_column"] in BATCH_CONFIG["output_columns"]
