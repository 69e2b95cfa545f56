from fastapi import FastAPI
from pydantic import BaseModel
import logging

from compiler import compile_line
from errors import LineTooLongError, VeerjiSyntaxError
from veerji_ast import Program, PrintStatement

logger = logging.getLogger(__name__)

app = FastAPI(title="Veerji Compiler", version="1.0.0")

# --- Data models ---
class CodeRequest(BaseModel):
    code: str

# --- Helpers ---

def first_line(code: str) -> str:
    """Only the first line of a program is compiled."""
    return code.partition("\n")[0]

def ast_to_dict(node):
    if isinstance(node, Program):
        return {"type": "Program", "count": node.count, "statements": [ast_to_dict(s) for s in node]}
    if isinstance(node, PrintStatement):
        return {"type": "PrintStatement", "value": node.value}
    return {"type": "Unknown", "value": str(node)}

# --- API endpoints ---
@app.post("/api/compile")
async def compile_code(request: CodeRequest):
    try:
        result = compile_line(first_line(request.code))
    except VeerjiSyntaxError as e:
        logger.info("compile rejected: %s", e)
        return {"success": False, "errors": [str(e)], "position": e.position, "token": e.token_text}
    except LineTooLongError as e:
        return {"success": False, "errors": [str(e)]}

    token_list = [{"type": t.type.name, "value": t.value} for t in result.tokens]
    return {
        "success": True,
        "tokens": token_list,
        "ast": ast_to_dict(result.program),
        "assembly": result.assembly,
    }

@app.get("/api/examples")
async def get_examples():
    return {
        "hello": {"name": "Hello (Veerji)", "code": "ਲਿਖੋ ☬ Hello, World!"},
        "sat_sri_akal": {"name": "Greeting (Veerji)", "code": "ਲਿਖੋ ☬ ਸਤ ਸ੍ਰੀ ਅਕਾਲ"},
        "missing_separator": {"name": "Syntax error (Veerji)", "code": "ਲਿਖੋ Hello"},
    }
