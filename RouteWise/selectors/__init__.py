from RouteWise.selectors.base import BaseSelector
from RouteWise.selectors.selector_rule_based import RuleBasedSelector, SelectionThresholds


def get_selector(name: str = "rule_based", **kwargs) -> BaseSelector:
    if name == "rule_based":
        return RuleBasedSelector(**kwargs)
    raise ValueError(f"Unknown selector: {name}")


__all__ = ["BaseSelector", "RuleBasedSelector", "SelectionThresholds", "get_selector"]
