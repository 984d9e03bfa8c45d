import allure


def build_retry_insight(attempts: list[dict]) -> list[str]:
    """根据每次 attempt 的结果生成 Retry Insight 文本"""
    lines = []

    failed = [a for a in attempts if a["status"] == "FAILED"]
    passed = [a for a in attempts if a["status"] == "PASSED"]

    if failed and passed:
        lines += [f"• Failed {len(failed)} times, then passed on retry", "• Likely flaky test (unstable behavior)"]
    elif attempts and len(failed) == len(attempts):
        lines.append(f"• All {len(attempts)} attempts failed")

    errors = {a["error_type"] for a in failed if a.get("error_type")}
    if len(errors) == 1:
        lines.append(f"• Same failure type across failed attempts: {errors.pop()}")
    elif len(errors) > 1:
        lines.append(f"• Failure type changed between attempts: {', '.join(sorted(errors))}")

    urls = {a["url"] for a in attempts if a.get("url")}
    if len(urls) > 1:
        lines.append("• Failed at different URLs")
    return lines


def is_final_attempt(attempts: list[dict], attempt: int, reruns: int | None) -> bool:
    """用例不再重跑：最后一次 attempt，或中途已通过"""
    if not attempts:
        return False
    return attempt >= (reruns or 0) + 1 or attempts[-1]["status"] == "PASSED"


def attach_retry_insight(attempts: list[dict]):
    """最后一次 attempt 结束后，把汇总作为文本附件挂到 allure"""
    rows = [f"Attempt {a['attempt']}: {a['status']} ({a['duration']}s) {a.get('error_type') or ''} {a.get('url') or ''}"
            for a in attempts]
    insight = build_retry_insight(attempts)
    allure.attach("\n".join(rows + [""] + insight), name="Retry Insight", attachment_type=allure.attachment_type.TEXT)
