"""Tests for the whole-file UI element, action and state mutation inventories."""

import pytest

from ui_flow.analysis.inventory import (
    extract_actions,
    extract_state_mutations,
    extract_ui_elements,
    is_ui_receiver,
)


class TestExtractUiElements:
    def test_extract_button(self, parse_rust) -> None:
        """Should inventory a button with its label."""
        code = """
            fn show(ui: &mut egui::Ui) {
                ui.button("Click me");
            }
        """
        elements = extract_ui_elements("test.rs", parse_rust(code))

        assert len(elements) == 1
        assert elements[0].element_type == "button"
        assert elements[0].label == "Click me"
        assert elements[0].context == "show"
        assert elements[0].file_path == "test.rs"
        assert elements[0].response_var is None

    def test_extract_multiple_elements(self, parse_rust) -> None:
        """Should inventory every element in source order."""
        code = """
            fn show(ui: &mut egui::Ui, state: &mut State) {
                ui.heading("Title");
                ui.label("Description");
                ui.checkbox(&mut state.enabled, "Enable");
                ui.button("Submit");
            }
        """
        elements = extract_ui_elements("test.rs", parse_rust(code))

        assert [e.element_type for e in elements] == ["heading", "label", "checkbox", "button"]
        assert elements[2].label == "Enable"

    def test_nested_ui(self, parse_rust) -> None:
        """Should inventory elements inside layout closures."""
        code = """
            fn show(ctx: &egui::Context) {
                egui::Window::new("Test").show(ctx, |ui| {
                    ui.button("Inside window");
                });
            }
        """
        elements = extract_ui_elements("test.rs", parse_rust(code))

        assert len(elements) == 1
        assert elements[0].element_type == "button"
        assert elements[0].label == "Inside window"

    def test_extended_widgets(self, parse_rust) -> None:
        """Should inventory the wider widget table."""
        code = """
            fn show(ui: &mut egui::Ui, color: &mut [f32; 3]) {
                ui.separator();
                ui.hyperlink_to("Docs", "https://docs.rs");
                ui.color_edit_button_rgb(color);
            }
        """
        elements = extract_ui_elements("test.rs", parse_rust(code))

        assert [(e.element_type, e.label) for e in elements] == [
            ("separator", None),
            ("hyperlink_to", "Docs"),
            ("color_edit_button_rgb", None),
        ]

    def test_non_ui_receiver_ignored(self, parse_rust) -> None:
        """Should skip calls on receivers that are not UI handles."""
        code = """
            fn show(state: &mut State) {
                state.label("not a widget");
                menu::button("scoped");
            }
        """
        assert extract_ui_elements("test.rs", parse_rust(code)) == []

    def test_context_per_function(self, parse_rust) -> None:
        """Should stamp each element with its function."""
        code = """
            fn header(ui: &mut egui::Ui) {
                ui.heading("Header");
            }

            fn footer(footer_ui: &mut egui::Ui) {
                footer_ui.small_button("Footer");
            }
        """
        elements = extract_ui_elements("test.rs", parse_rust(code))

        assert [(e.label, e.context) for e in elements] == [
            ("Header", "header"),
            ("Footer", "footer"),
        ]


class TestIsUiReceiver:
    @pytest.mark.parametrize(
        "code,expected",
        [
            ("ui", True),
            ("child_ui", True),
            ("&mut ui", True),
            ("ctx.ui()", True),
            ("ui.horizontal()", True),
            ("state", False),
            ("egui::ui", False),
            ("make()", False),
        ],
    )
    def test_receivers(self, parse_expr, code: str, expected: bool) -> None:
        """Should recognize UI receiver expressions."""
        assert is_ui_receiver(parse_expr(code)) is expected


class TestExtractActions:
    def test_extract_clicked(self, parse_rust) -> None:
        """Should inventory a click query."""
        code = """
            fn show(ui: &mut egui::Ui) {
                if ui.button("Click").clicked() {
                    println!("clicked!");
                }
            }
        """
        actions = extract_actions("test.rs", parse_rust(code))

        assert len(actions) == 1
        assert actions[0].action_type == "clicked"
        assert "button" in actions[0].source

    def test_extract_response_variable(self, parse_rust) -> None:
        """Should use the variable as the action source."""
        code = """
            fn show(ui: &mut egui::Ui) {
                let response = ui.button("Click");
                if response.clicked() {
                    // do something
                }
                if response.hovered() {
                    // highlight
                }
            }
        """
        actions = extract_actions("test.rs", parse_rust(code))

        assert [(a.action_type, a.source) for a in actions] == [
            ("clicked", "response"),
            ("hovered", "response"),
        ]

    def test_extract_changed(self, parse_rust) -> None:
        """Should inventory a change query."""
        code = """
            fn show(ui: &mut egui::Ui, value: &mut f32) {
                if ui.slider(value, 0.0..=100.0).changed() {
                    println!("slider changed");
                }
            }
        """
        actions = extract_actions("test.rs", parse_rust(code))

        assert len(actions) == 1
        assert actions[0].action_type == "changed"

    def test_multiple_actions_chained(self, parse_rust) -> None:
        """Should inventory every action in a condition."""
        code = """
            fn show(ui: &mut egui::Ui) {
                let r = ui.button("Test");
                if r.clicked() || r.secondary_clicked() {
                    // handle
                }
            }
        """
        actions = extract_actions("test.rs", parse_rust(code))

        assert [a.action_type for a in actions] == ["clicked", "secondary_clicked"]

    def test_actions_outside_conditionals(self, parse_rust) -> None:
        """Should inventory actions outside conditionals too."""
        code = """
            fn show(ui: &mut egui::Ui, state: &mut State) {
                let r = ui.button("Hover");
                state.hot = r.highlighted();
            }
        """
        actions = extract_actions("test.rs", parse_rust(code))

        assert [(a.action_type, a.context) for a in actions] == [("highlighted", "show")]


class TestExtractStateMutations:
    def test_extract_field_assign(self, parse_rust) -> None:
        """Should inventory a field assignment."""
        code = """
            fn update(state: &mut AppState) {
                state.counter = 0;
            }
        """
        mutations = extract_state_mutations("test.rs", parse_rust(code))

        assert len(mutations) == 1
        assert mutations[0].target == "state.counter"
        assert mutations[0].mutation_type == "assign"
        assert mutations[0].context == "update"

    def test_extract_add_assign(self, parse_rust) -> None:
        """Should inventory a compound assignment."""
        code = """
            fn increment(state: &mut AppState) {
                state.counter += 1;
            }
        """
        mutations = extract_state_mutations("test.rs", parse_rust(code))

        assert [(m.target, m.mutation_type) for m in mutations] == [
            ("state.counter", "add_assign")
        ]

    def test_extended_operators(self, parse_rust) -> None:
        """Should inventory the wider operator table."""
        code = """
            fn wrap(state: &mut AppState) {
                state.index %= 8;
                state.flags |= 1;
                state.mask <<= 2;
            }
        """
        mutations = extract_state_mutations("test.rs", parse_rust(code))

        assert [m.mutation_type for m in mutations] == ["rem_assign", "bitor_assign", "shl_assign"]

    def test_extract_method_mutation(self, parse_rust) -> None:
        """Should inventory a mutating method call."""
        code = """
            fn add_item(state: &mut AppState, item: Item) {
                state.items.push(item);
                state.items.swap_remove(0);
            }
        """
        mutations = extract_state_mutations("test.rs", parse_rust(code))

        assert [(m.target, m.mutation_type) for m in mutations] == [
            ("state.items", "method:push"),
            ("state.items", "method:swap_remove"),
        ]

    def test_extract_nested_field(self, parse_rust) -> None:
        """Should keep nested field paths."""
        code = """
            fn update_name(state: &mut AppState) {
                state.user.profile.name = "New Name".to_string();
            }
        """
        mutations = extract_state_mutations("test.rs", parse_rust(code))

        assert len(mutations) == 1
        assert mutations[0].target == "state.user.profile.name"

    def test_ignore_local_variable(self, parse_rust) -> None:
        """Should skip assignments to locals."""
        code = """
            fn calculate() {
                let x = 5;
                let mut y = 10;
                y = 20;
            }
        """
        assert extract_state_mutations("test.rs", parse_rust(code)) == []

    def test_includes_nested_conditionals(self, parse_rust) -> None:
        """Should include mutations under nested conditionals."""
        code = """
            fn show(ui: &mut egui::Ui, state: &mut AppState) {
                if ui.button("Increment").clicked() {
                    state.counter += 1;
                    if state.counter > 10 {
                        state.counter = 0;
                    }
                }
                if ui.button("Reset").clicked() {
                    state.counter = 0;
                }
            }
        """
        mutations = extract_state_mutations("test.rs", parse_rust(code))

        assert [m.mutation_type for m in mutations] == ["add_assign", "assign", "assign"]
