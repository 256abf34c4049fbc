"""adminhome - 嵌入式管理后台示例应用."""

__version__ = "0.1.0"
