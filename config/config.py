"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 计算器参数
CALCULATOR_CONFIG = {
    "default_mode": 1,  # 1=Scientific, 2=Accounting
    "numeric_dtype": "float32",  # 单精度；可选 float64
    "cache_size": 256,
    "accounting_flat_precedence": False,  # True: Accounting 模式所有操作符同级
}

# 计算模式菜单
COMPUTATION_MODES = {
    1: "Scientific",
    2: "Accounting",
}

# 工具菜单
UTILITY_TOOLS = {
    1: "Calculator",
}

# 命令行配置
CLI_CONFIG = {
    "welcome": "Welcome to my beginner python applications, select which utility tools you want to use",
    "mode_prompt": "Welcome to calculator application, please select computation mode",
    "expression_prompt": "Enter numerical value(s) with operator (s):",
    "exit_commands": ("quit", "exit"),
    "log_level": "WARNING",  # 交互模式下避免日志和提示交错
    "log_format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert CALCULATOR_CONFIG["default_mode"] in COMPUTATION_MODES, "默认模式必须在模式菜单中"
    assert CALCULATOR_CONFIG["numeric_dtype"] in ("float32", "float64"), "仅支持 float32/float64"
    assert CALCULATOR_CONFIG["cache_size"] >= 0, "缓存大小不能为负"
    assert isinstance(logging.getLevelName(CLI_CONFIG["log_level"]), int), "未知日志级别"
    logger.info("Configuration validated successfully!")
