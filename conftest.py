import json
import shutil
from pathlib import Path

import allure
import pytest
from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import expect, sync_playwright

from config.settings import settings
from reporting.retry_insight import attach_retry_insight, is_final_attempt
from scripts.save_login_state import customer_file, save_login_state
from utils.logger import setup_logger

ARTIFACT_DIRS = ["artifacts", "videos", "tracing", "allure-results"]


def pytest_configure(config):
    setup_logger(settings.log_level)
    expect.set_options(timeout=settings.expect_timeout_ms)


# ================== Session Fixtures ==================
@pytest.fixture(scope="session")
def playwright_instance():
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance):
    """浏览器只启动一次"""
    browser = getattr(playwright_instance, settings.browser).launch(headless=settings.headless)
    logger.info("browser started: {} headless={}", settings.browser, settings.headless)
    yield browser
    browser.close()


@pytest.fixture(scope="session", autouse=True)
def clean_artifacts():
    """测试session启动前，清空artifacts、videos、tracing、allure-results"""
    for path in ARTIFACT_DIRS:
        p = Path(path)
        if p.exists():
            shutil.rmtree(p)  # 删除目录 p 及其包含的所有文件和子目录。
        p.mkdir()


@pytest.fixture(scope="session")
def login_state() -> dict:
    """
     确保登录态文件存在且有效，返回对应的顾客信息
     只有 need_login 的用例才会触发（注册一个新顾客）
    """
    login_file = Path(settings.storage_state_path)
    customer = customer_file()

    if not login_file.exists() or login_file.stat().st_size == 0 or not customer.exists():
        logger.info("🔐 登录态不存在或无效，重新生成")
        return save_login_state()
    logger.info("✅ 登录态已存在且有效，跳过生成")
    return json.loads(customer.read_text(encoding="utf-8"))


# ================== Function Fixtures ==================
@pytest.fixture(scope="function")
def context(browser, request):
    """
    每个测试方法一个全新 context（独立 cookies/storage）
    - need_login 的用例基于保存的登录态
    - 视频 + tracing 每个 attempt 单独目录
    """
    attempt = getattr(request.node, "execution_count", 1)
    # 锁定本次 context 对应的 attempt；rerun 时 item 是同一个对象，失败标记要重置
    request.node._current_attempt = attempt
    request.node._failed = False

    attempt_dir = f"attempt_{attempt}"
    record_video_dir = Path("videos") / attempt_dir
    record_tracing_dir = Path("tracing") / attempt_dir
    record_video_dir.mkdir(parents=True, exist_ok=True)
    record_tracing_dir.mkdir(parents=True, exist_ok=True)

    need_login = request.node.get_closest_marker("need_login") is not None
    if need_login:
        request.getfixturevalue("login_state")

    context = browser.new_context(
        storage_state=settings.storage_state_path if need_login else None,
        record_video_dir=str(record_video_dir),
        record_video_size={"width": 1280, "height": 720},
        viewport={"width": 1280, "height": 720})
    context.set_default_timeout(settings.action_timeout_ms)
    context.set_default_navigation_timeout(settings.navigation_timeout_ms)

    # tracing 需要手动 start -> stop 并指定 zip 路径
    context.tracing.start(name=attempt_dir, screenshots=True, snapshots=True, sources=True)

    yield context

    #  ======== teardown阶段 ========
    trace_path = record_tracing_dir / "trace.zip"
    try:
        context.tracing.stop(path=trace_path)  # trace.zip 在这里真正生成
    finally:
        context.close()  # 先close：释放video文件句柄，video真正写入磁盘

    #  ======== 执行成功用例删除video、trace ========
    if not getattr(request.node, "_failed", False):
        shutil.rmtree(record_video_dir, ignore_errors=True)
        shutil.rmtree(record_tracing_dir, ignore_errors=True)
        _finish_attempts(request.node, attempt)
        return

    #  ======== 执行失败用例移动video、trace到artifacts目录 ========
    target_dir = _artifact_dir(request.node, attempt)
    for video_file in record_video_dir.glob("*.webm"):
        shutil.move(str(video_file), target_dir / video_file.name)
    if trace_path.exists():
        shutil.move(str(trace_path), target_dir / "trace.zip")

    # 补充 hook 阶段记录的 attempt 信息
    current = next((a for a in getattr(request.node, "_attempts", []) if a["attempt"] == attempt), None)
    if current is not None:
        current.update({
            "has_screenshot": (target_dir / "failure.png").exists(),
            "has_video": any(target_dir.glob("*.webm")),
            "has_trace": (target_dir / "trace.zip").exists(),
            "base_dir": str(target_dir),
        })

    # hook 触发早于 context teardown，video 和 trace 只能在这里 attach
    for video in target_dir.glob("*.webm"):
        allure.attach.file(video, name="Video", attachment_type=allure.attachment_type.WEBM)
    trace = target_dir / "trace.zip"
    if trace.exists():
        allure.attach.file(trace, name="Playwright-Trace.zip")

    _finish_attempts(request.node, attempt)


@pytest.fixture(scope="function")
def page(context):
    """每个测试方法一个新 page"""
    page = context.new_page()
    console_errors = []  # console.error 收集到内存

    # page.on("console") 是浏览器级别监听，不会因为跳转丢失
    page.on(
        "console",
        lambda msg: console_errors.append({
            "type": msg.type,
            "text": msg.text,
            "location": str(msg.location)
        }) if msg.type == "error" else None
    )
    page._console_errors = console_errors  # 挂到page上，方便hook里取
    yield page
    page.close()


@pytest.fixture(scope="function")
def customer(login_state) -> dict:
    """need_login 用例对应的已登录顾客"""
    return login_state


# ================== Pytest Hook：失败处理 ==================
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    记录每次 attempt 结果；测试失败时自动保存：
    - 截图
    - URL
    - Console errors
    """
    outcome = yield
    rep = outcome.get_result()
    duration = round(rep.duration, 2)

    if rep.when != "call":
        return
    page = item.funcargs.get("page")
    if not page:
        return

    attempt = getattr(item, "execution_count", 1)
    if not hasattr(item, "_attempts"):
        item._attempts = []
    item._attempts.append({
        "attempt": attempt,
        "status": "FAILED" if rep.failed else "PASSED",
        "duration": duration,
        "error_type": call.excinfo.typename if call.excinfo else "",
        "url": page.url,
    })
    if not rep.failed:
        return

    # 标记失败（跨fixture通信，告诉 context 这是一次失败执行）
    item._failed = True

    base_dir = _artifact_dir(item, attempt)
    screenshot = base_dir / "failure.png"
    try:
        page.screenshot(path=screenshot, full_page=True)
    except PlaywrightError as e:  # 页面已崩溃/关闭时仍要保留其余证据
        logger.warning("失败截图生成失败：{}", e)
    (base_dir / "url.txt").write_text(page.url, encoding="utf-8")
    console_file = base_dir / "console_errors.json"
    console_file.write_text(
        json.dumps(getattr(page, "_console_errors", []), indent=2, ensure_ascii=False), encoding="utf-8")

    if screenshot.exists():
        allure.attach.file(screenshot, name="Failure-Screenshot", attachment_type=allure.attachment_type.PNG)
    allure.attach(page.url, name="Page-Url", attachment_type=allure.attachment_type.TEXT)
    allure.attach.file(console_file, name="Console-Errors", attachment_type=allure.attachment_type.JSON)
    logger.error("❌ {} 失败 (attempt {}) @ {}", item.nodeid, attempt, page.url)


def _artifact_dir(item, attempt: int) -> Path:
    module = item.module.__name__.split(".")[-1]
    cls = item.cls.__name__ if item.cls else "no_class"
    target_dir = Path("artifacts") / module / cls / item.name / f"attempt_{attempt}"
    target_dir.mkdir(parents=True, exist_ok=True)
    return target_dir


def _finish_attempts(node, attempt: int):
    """最后一次 attempt（或中途通过）时挂 Retry Insight"""
    attempts = getattr(node, "_attempts", [])
    if len(attempts) > 1 and is_final_attempt(attempts, attempt, getattr(node.config.option, "reruns", 0)):
        attach_retry_insight(attempts)
