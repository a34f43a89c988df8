#!/usr/bin/env python3
"""
MTG 交易市场 统一 CLI 工具

用法:
    python cli.py serve                       # 启动开发服务器 (PORT, 默认 3000)
    python cli.py init-db                     # 创建数据库表
    python cli.py import-cards data/cards.csv # 导入卡牌详情
"""
import sys
import os
import argparse

# 设置路径
script_dir = os.path.dirname(os.path.abspath(__file__))
project_dir = os.path.dirname(script_dir)
sys.path.insert(0, project_dir)

from loguru import logger


def cmd_serve(args):
    """启动服务器"""
    from mtg_market import create_app, db

    app = create_app(args.env)
    port = args.port or app.config['PORT']
    logger.info(f"服务器启动: http://localhost:{port}")
    try:
        app.run(host=args.host, port=port)
    finally:
        # 关闭连接池
        with app.app_context():
            db.engine.dispose()
        logger.info("连接池已关闭")


def cmd_init_db(args):
    """创建数据库表"""
    from mtg_market import create_app, db

    app = create_app(args.env)
    with app.app_context():
        db.create_all()
        tables = sorted(db.metadata.tables)
    print(f"✅ 数据库表创建完成: {', '.join(tables)}")


def cmd_import_cards(args):
    """导入卡牌详情"""
    from mtg_market import create_app
    from mtg_market.importer import import_cards_csv

    if not os.path.exists(args.csv):
        print(f"文件不存在: {args.csv}")
        sys.exit(1)

    app = create_app(args.env)
    with app.app_context():
        added, skipped = import_cards_csv(args.csv)
    print(f"完成! 新增 {added} 张，跳过 {skipped} 张")


def main():
    parser = argparse.ArgumentParser(
        description='MTG 交易市场 管理工具',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--env', type=str, default=None,
                        choices=['development', 'production', 'testing'],
                        help='配置环境 (默认读取 FLASK_ENV)')
    subparsers = parser.add_subparsers(dest='command', help='子命令')

    # serve 子命令
    serve_parser = subparsers.add_parser('serve', help='启动服务器')
    serve_parser.add_argument('--host', type=str, default='127.0.0.1')
    serve_parser.add_argument('--port', type=int, default=None)
    serve_parser.set_defaults(func=cmd_serve)

    # init-db 子命令
    init_parser = subparsers.add_parser('init-db', help='创建数据库表')
    init_parser.set_defaults(func=cmd_init_db)

    # import-cards 子命令
    import_parser = subparsers.add_parser('import-cards', help='从 CSV 导入卡牌详情')
    import_parser.add_argument('csv', type=str, help='CSV 文件路径')
    import_parser.set_defaults(func=cmd_import_cards)

    args = parser.parse_args()

    if args.command:
        args.func(args)
    else:
        parser.print_help()


if __name__ == '__main__':
    main()
