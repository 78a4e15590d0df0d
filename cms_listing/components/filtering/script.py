"""
Browser source of the filter state machine.

The function receives its configuration as a single JSON object, so no
build-time value is ever spliced into code.
"""

SCRIPT_SOURCE = """
(function (config) {
  "use strict";

  function createState() {
    return { selectedGrade: "", selectedTopic: "", searchQuery: "" };
  }

  function withField(state, name, value) {
    var next = {
      selectedGrade: state.selectedGrade,
      selectedTopic: state.selectedTopic,
      searchQuery: state.searchQuery
    };
    next[name] = value;
    return next;
  }

  function isVisible(state, item) {
    var attrs = config.attributes;
    if (state.selectedGrade && item.getAttribute(attrs.grade) !== state.selectedGrade) {
      return false;
    }
    if (state.selectedTopic && item.getAttribute(attrs.topic) !== state.selectedTopic) {
      return false;
    }
    var query = state.searchQuery.toLowerCase();
    if (query) {
      var haystack = (item.getAttribute(attrs.title) || "") + " " +
        (item.getAttribute(attrs.description) || "");
      if (haystack.indexOf(query) === -1) {
        return false;
      }
    }
    return true;
  }

  function evaluate(state, items) {
    var visible = 0;
    items.forEach(function (item) {
      var show = isVisible(state, item);
      item.style.display = show ? "" : "none";
      if (show) {
        visible += 1;
      }
    });
    return visible;
  }

  function render(state) {
    var container = document.querySelector(config.containerSelector);
    if (!container) {
      return;
    }
    var items = Array.prototype.slice.call(
      container.querySelectorAll(config.selectors.item)
    );
    var visible = evaluate(state, items);

    document.querySelectorAll(config.selectors.resultsCount).forEach(function (node) {
      node.textContent = String(visible);
    });
    document.querySelectorAll(config.selectors.emptyResults).forEach(function (node) {
      node.style.display = visible === 0 ? "block" : "none";
    });

    window.setTimeout(function () {
      var top = container.getBoundingClientRect().top + window.pageYOffset;
      window.scrollTo({ top: top, behavior: "smooth" });
    }, config.scrollDelayMs);
  }

  function clearInputs() {
    var radios = config.selectors.gradeInput + ", " + config.selectors.topicInput;
    document.querySelectorAll(radios).forEach(function (input) {
      input.checked = false;
    });
    document.querySelectorAll(config.selectors.searchInput).forEach(function (input) {
      input.value = "";
    });
  }

  function start() {
    var state = createState();

    function update(next) {
      state = next;
      render(state);
    }

    document.addEventListener("change", function (event) {
      var target = event.target;
      if (target.matches(config.selectors.gradeInput)) {
        update(withField(state, "selectedGrade", target.value));
      } else if (target.matches(config.selectors.topicInput)) {
        update(withField(state, "selectedTopic", target.value));
      }
    });

    document.addEventListener("input", function (event) {
      if (event.target.matches(config.selectors.searchInput)) {
        update(withField(state, "searchQuery", event.target.value));
      }
    });

    document.addEventListener("click", function (event) {
      if (event.target.closest(config.selectors.clearButton)) {
        event.preventDefault();
        clearInputs();
        update(createState());
      }
    });
  }

  if (document.readyState === "loading") {
    document.addEventListener("DOMContentLoaded", start);
  } else {
    start();
  }
})
"""
