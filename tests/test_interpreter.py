from interpreter import EXIT_LINE, run_code, split_statements


def test_pointer_into_array_targets_base_plus_one_word():
    trace = run_code("int arr[] = {10,20,30}; int* p = &arr[1];")
    final = trace.final
    arr = final.variable("arr")
    p = final.variable("p")
    assert arr.array_values == (10, 20, 30)
    assert p.is_pointer
    assert int(p.target_address, 16) == int(arr.address, 16) + 4


def test_stack_grows_down_one_word_per_variable():
    final = run_code("int a = 1;\nint b = 2;").final
    assert final.variable("a").address == "0x7ffefffc"
    assert final.variable("b").address == "0x7ffefff8"


def test_first_and_last_states():
    source = "int x = 5;\n\n// comment\nx = 6;"
    trace = run_code(source)
    assert trace[0].current_line_index == -1
    assert trace[0].main.variables == ()
    assert [s.current_line_index for s in trace.timeline] == [-1, 0, 3, 4]
    assert trace.final.output[-1] == EXIT_LINE
    assert trace.final.variable("x").value == "6"


def test_allocation_and_linking():
    source = "\n".join([
        "Node* head = new Node(10);",
        "head->next = new Node(20);",
        "head->val = 15;",
    ])
    final = run_code(source).final
    head = final.variable("head")
    first = final.block(head.target_address)
    assert first.address == "0x10000000"
    assert first.fields == {"val": "15", "next": "0x10000010"}
    second = final.block("0x10000010")
    assert second.fields == {"val": "20", "next": None}


def test_tree_types_get_left_and_right():
    final = run_code("BinaryTree* t = new BinaryTree(1);").final
    block = final.heap[0]
    assert block.fields["left"] is None and block.fields["right"] is None
    assert block.id == "heap_0x10000000"


def test_earlier_states_do_not_see_later_changes():
    trace = run_code("Node* a = new Node(1);\na->val = 2;\nint x = 3;\nx = 4;")
    assert trace[1].heap[0].fields["val"] == "1"
    assert trace[2].heap[0].fields["val"] == "2"
    assert trace[3].variable("x").value == "3"
    assert trace.final.variable("x").value == "4"


def test_printf_literal_and_variable():
    source = 'int x = 42;\nprintf("Hello, world\\n");\nprintf("%d", x);\ncout << x << endl;'
    out = run_code(source).final.output
    assert list(out) == ["Hello, world", "42", "42", EXIT_LINE]


def test_printf_heap_field():
    out = run_code('Node* n = new Node(7);\nprintf("%d", n->val);').final.output
    assert out[0] == "7"


def test_unknown_address_of_target_is_null():
    final = run_code("int* p = &ghost;").final
    assert final.variable("p").target_address == "0x000000"


def test_unmatched_line_still_produces_a_state():
    trace = run_code("while (x) { }")
    assert len(trace) == 3
    assert trace[1].main.variables == ()


def test_split_statements_respects_braces_and_quotes():
    assert split_statements('int a[] = {1; 2}; printf("a;b");') == [
        "int a[] = {1; 2};",
        'printf("a;b");',
    ]
