# ui.utils package
