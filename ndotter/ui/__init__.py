"""UI components for the ndotter GUI.

Qt widgets live in main_window, conversion_panel and widgets. The state
module holds the Qt-free GUI model and can be imported without PyQt6.
"""
