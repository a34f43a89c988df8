"""
路由蓝图
"""
