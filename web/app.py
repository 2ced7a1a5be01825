"""FastAPI shell for the tax burden calculator."""

from __future__ import annotations

import html
import logging
import os
from typing import Optional

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from core.engine import calculate_tax_burden
from core.formatting import format_currency, format_rate
from core.models import DEFAULT_INPUTS, TaxBurdenResult, TaxInputs
from core.session import CalculatorSession, coerce_field

logger = logging.getLogger(__name__)

app = FastAPI(title="Tax Burden Calculator", description="Household tax burden estimate")

_SESSION = CalculatorSession()

_DEFAULT_TITLE = "Tax Burden Calculator"


class TaxInputsRequest(BaseModel):
    gross_income: float
    household_size: int
    home_value: float
    cars_owned: int
    state: str = DEFAULT_INPUTS.state


class FieldUpdateRequest(BaseModel):
    value: str


class ExplanationsRequest(BaseModel):
    show: Optional[bool] = None


async def _handle_errors(request: Request, exc: Exception):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse({"error": str(exc)}, status_code=400)


app.add_exception_handler(ValueError, _handle_errors)


@app.get("/", response_class=HTMLResponse)
async def calculator_page() -> HTMLResponse:
    return HTMLResponse(_render_calculator_page(_SESSION))


@app.post("/calculate", response_class=HTMLResponse)
async def calculate(
    gross_income: str = Form(""),
    household_size: str = Form(""),
    home_value: str = Form(""),
    cars_owned: str = Form(""),
    state: str = Form(DEFAULT_INPUTS.state),
    show_explanations: Optional[str] = Form(None),
) -> HTMLResponse:
    inputs = TaxInputs(
        gross_income=coerce_field("gross_income", gross_income),
        household_size=coerce_field("household_size", household_size),
        home_value=coerce_field("home_value", home_value),
        cars_owned=coerce_field("cars_owned", cars_owned),
        state=coerce_field("state", state),
    )
    _SESSION.set_inputs(inputs)
    _SESSION.set_explanations(show_explanations is not None)
    return HTMLResponse(_render_calculator_page(_SESSION))


@app.get("/api/inputs")
async def get_inputs():
    return {
        "inputs": _SESSION.inputs.to_dict(),
        "show_explanations": _SESSION.show_explanations,
    }


@app.put("/api/inputs")
async def replace_inputs(payload: TaxInputsRequest):
    inputs = _SESSION.set_inputs(_inputs_from_request(payload))
    return {"inputs": inputs.to_dict(), "result": _SESSION.result.to_dict()}


@app.patch("/api/inputs/{field}")
async def update_input(field: str, payload: FieldUpdateRequest):
    inputs = _SESSION.update_field(field, payload.value)
    return {"inputs": inputs.to_dict(), "result": _SESSION.result.to_dict()}


@app.post("/api/explanations")
async def set_explanations(payload: ExplanationsRequest):
    if payload.show is None:
        show = _SESSION.toggle_explanations()
    else:
        show = _SESSION.set_explanations(payload.show)
    return {"show_explanations": show}


@app.get("/api/result")
async def get_result():
    return _result_payload(_SESSION)


@app.post("/api/calculate")
async def calculate_stateless(payload: TaxInputsRequest):
    result = calculate_tax_burden(_inputs_from_request(payload))
    return result.to_dict()


@app.post("/api/reset")
async def reset():
    _reset_state()
    return {"inputs": _SESSION.inputs.to_dict(), "show_explanations": _SESSION.show_explanations}


def _inputs_from_request(payload: TaxInputsRequest) -> TaxInputs:
    return TaxInputs(**{
        name: coerce_field(name, value) for name, value in payload.model_dump().items()
    })


def _result_payload(session: CalculatorSession) -> dict:
    result = session.result
    payload = result.to_dict()
    payload["formatted"] = _formatted_summary(result)
    payload["lines"] = [
        {"label": label, "amount": amount, "explanation": explanation}
        for label, amount, explanation in session.render_lines()
    ]
    return payload


def _formatted_summary(result: TaxBurdenResult) -> dict:
    return {
        "total_taxes": format_currency(result.total_taxes),
        "effective_rate": format_rate(result.effective_rate),
        "take_home": format_currency(result.take_home),
    }


def _number_value(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _render_result_section(session: CalculatorSession) -> str:
    summary = _formatted_summary(session.result)

    lines = []
    for label, amount, explanation in session.render_lines():
        note = ""
        if explanation is not None:
            note = f"<div class=\"explanation muted\">{html.escape(explanation)}</div>"
        lines.append(
            f"<li><span>{html.escape(label)}</span>: <strong>{html.escape(amount)}</strong>{note}</li>"
        )

    return f"""
    <section class=\"panel results\">
      <h2>Your Tax Burden</h2>
      <div class=\"result-item\">Total Taxes Paid: <strong>{html.escape(summary['total_taxes'])}</strong></div>
      <div class=\"result-item\">Effective Tax Rate: <strong>{html.escape(summary['effective_rate'])}</strong></div>
      <div class=\"result-item\">Actual Take Home: <strong>{html.escape(summary['take_home'])}</strong></div>
      <h3>Breakdown</h3>
      <ul class=\"breakdown\">{''.join(lines)}</ul>
    </section>
"""


_PAGE_STYLE = """
    :root { color-scheme: light dark; --bg: #f7f8fb; --text: #0b0d12; --panel: #ffffff;
            --border: #d3d8e0; --accent: #1f5fbf; --muted: #596273; }
    [data-theme="night"] { --bg: #0b1118; --text: #f1f4f8; --panel: #121a24;
                           --border: #2a3340; --accent: #5aa2ff; --muted: #a5b0c2; }
    body { font-family: "Segoe UI", Arial, sans-serif; margin: 0 auto; max-width: 860px;
           padding: 1.5rem 2rem; background: var(--bg); color: var(--text); }
    header { display: flex; justify-content: space-between; align-items: center; }
    .panel { background: var(--panel); border: 1px solid var(--border); border-radius: 12px;
             padding: 1.25rem 1.5rem; margin-bottom: 1.5rem; }
    .form-group label { display: block; margin: 0.75rem 0 0.25rem; font-weight: 600; }
    .form-group input { width: 100%; padding: 0.5rem; border: 1px solid var(--border);
                        border-radius: 8px; background: var(--panel); color: var(--text); }
    button { margin-top: 1rem; padding: 0.5rem 1.2rem; border: none; border-radius: 8px;
             background: var(--accent); color: white; font-weight: 600; }
    .muted { color: var(--muted); }
    .result-item { font-size: 1.1rem; margin-bottom: 0.4rem; }
    .explanation { font-size: 0.9rem; margin-bottom: 0.4rem; }
"""

_THEME_SCRIPT = """
    (function() {
      var toggle = document.getElementById('themeToggle');
      function apply(theme) {
        document.documentElement.setAttribute('data-theme', theme);
        toggle.checked = theme === 'night';
      }
      try { apply(localStorage.getItem('taxburden-theme') || 'day'); } catch (err) { apply('day'); }
      toggle.onchange = function() {
        var theme = toggle.checked ? 'night' : 'day';
        apply(theme);
        try { localStorage.setItem('taxburden-theme', theme); } catch (err) {}
      };
    })();
"""

_NUMBER_FIELDS = (
    ("gross_income", "Annual Gross Income"),
    ("household_size", "Household Size"),
    ("home_value", "Home Value"),
    ("cars_owned", "Number of Cars"),
)


def _render_form(session: CalculatorSession) -> str:
    inputs = session.inputs
    groups = "".join(
        f'<div class="form-group"><label>{label}</label>'
        f'<input type="number" step="any" name="{name}" '
        f'value="{_number_value(getattr(inputs, name))}" /></div>'
        for name, label in _NUMBER_FIELDS
    )
    checked = " checked" if session.show_explanations else ""
    return (
        '<form action="/calculate" method="post">'
        f"{groups}"
        f'<input type="hidden" name="state" value="{html.escape(inputs.state)}" />'
        '<label><input type="checkbox" name="show_explanations" '
        f'value="1"{checked} /> Show explanations</label>'
        '<div><button type="submit">Calculate</button></div>'
        "</form>"
    )


def _render_calculator_page(session: CalculatorSession) -> str:
    title = html.escape(os.environ.get("TAX_BURDEN_TITLE") or _DEFAULT_TITLE)
    return f"""<!DOCTYPE html>
<html data-theme="day">
<head>
  <meta charset="UTF-8" />
  <title>{title}</title>
  <style>{_PAGE_STYLE}</style>
</head>
<body>
  <header>
    <div>
      <h1>{title}</h1>
      <p class="muted">Calculate the <em>real</em> percentage of your paycheck that goes to taxes.</p>
    </div>
    <label>Night mode <input id="themeToggle" type="checkbox" /></label>
  </header>
  <section class="panel">{_render_form(session)}</section>
  {_render_result_section(session)}
  <script>{_THEME_SCRIPT}</script>
</body>
</html>"""


def _reset_state() -> None:
    _SESSION.reset()
