from .console import cnsl, df_table, print_df, set_logger

__all__ = ['cnsl', 'df_table', 'print_df', 'set_logger']
