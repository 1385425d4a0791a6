"""
核心层
配置、数据库、鉴权、错误处理与中间件
"""
