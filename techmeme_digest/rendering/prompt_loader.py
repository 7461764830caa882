import yaml
from importlib import resources
from jinja2 import Environment

DIGEST_PROMPT = "digest.yaml"


def load_prompt(name: str = DIGEST_PROMPT) -> dict:
    text = resources.files("techmeme_digest.prompts").joinpath(name).read_text(encoding="utf-8")
    return yaml.safe_load(text) or {}


def render_prompt(content: str, name: str = DIGEST_PROMPT) -> str:
    data = load_prompt(name)
    env = Environment(autoescape=False, trim_blocks=True, lstrip_blocks=True)
    sys_part = env.from_string(data.get("system", "")).render(content=content)
    task_part = env.from_string(data.get("task", "")).render(content=content)
    return (sys_part + "\n\n" + task_part).strip() + "\n"
