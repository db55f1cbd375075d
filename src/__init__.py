"""
Hulk プロジェクトのトップレベルパッケージ
"""
