# ===== CONSTANTS & CONFIGURATION =====
class Config:
    # Colors
    DARK = {
        "bg": "#0A0E14",
        "card": "#151A21",
        "cell": "#1A1F29",
        "cell_focus": "#232834",
        "border": "#2A2F3A",
        "accent": "#3794FF",
        "accent_hover": "#4CA6FF",
        "accent_pressed": "#1A7FFF",
        "success": "#4EC9B0",
        "error": "#F44747",
        "text": "#D4D4D4",
        "subtext": "#858585",
    }
    LIGHT = {
        "bg": "#F9FAFB",
        "card": "#FFFFFF",
        "cell": "#FFFFFF",
        "cell_focus": "#EFF6FF",
        "border": "#D1D5DB",
        "accent": "#2563EB",
        "accent_hover": "#1D4ED8",
        "accent_pressed": "#1E40AF",
        "success": "#047857",
        "error": "#B91C1C",
        "text": "#111827",
        "subtext": "#6B7280",
    }

    # Sizes
    MAX_MATRIX_SIZE = 5
    MIN_MATRIX_SIZE = 1
    DEFAULT_MATRIX_SIZE = 2
    CELL_WIDTH = 64
    CELL_HEIGHT = 48

    # Computation
    DECIMALS = 2

    # Persistence
    ORG_NAME = "MatrixSolver"
    APP_NAME = "Matrix Solver"
    THEME_KEY = "matrix-solver-theme"
    DEBUG_ENV = "MATRIX_SOLVER_DEBUG"
