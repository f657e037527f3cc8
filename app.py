import logging

import streamlit as st
import numpy as np
import plotly.express as px

from prefix_trie import PrefixTrie
from prefix_trie.report import depth_histogram, fuzzy_frame, match_frame, stats_frame
from prefix_trie.work_loads import gen_words_with_prefix_freq

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

DEMO_WORDS = ["race", "racecar", "raceday", "raccoon", "test", "testing", "tester",
              "hello", "help", "world"]

# Configure page
st.set_page_config(
    page_title="Prefix Trie Explorer",
    page_icon="🌳",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.title("🌳 Prefix Trie Explorer")
st.markdown("---")

if "trie" not in st.session_state:
    st.session_state["trie"] = PrefixTrie.from_words(DEMO_WORDS)

# Sidebar
with st.sidebar:
    st.header("Navigation")
    page = st.selectbox(
        "Choose a section:",
        ["Statistics", "Prefix Match", "Fuzzy Search", "Tree View", "Import / Export"]
    )

    st.markdown("---")
    st.subheader("Build Trie")
    casefold = st.checkbox("Case-insensitive (casefold)", value=False)
    source = st.radio("Word source", ["Demo words", "Generated work load", "Paste words"])

    words = DEMO_WORDS
    if source == "Generated work load":
        num_words = st.number_input("Number of words", min_value=1, max_value=100_000, value=1_000)
        prefix_freq = st.slider("Prefix frequency", min_value=0.0, max_value=1.0, value=0.3)
        seed = st.number_input("Seed", min_value=0, value=42)
        words = gen_words_with_prefix_freq(int(num_words), prefix_freq, seed=int(seed))
    elif source == "Paste words":
        pasted = st.text_area("One word per line", value="\n".join(DEMO_WORDS))
        words = [w.strip() for w in pasted.splitlines() if w.strip()]

    if st.button("🔄 Rebuild Trie"):
        normalize = str.casefold if casefold else None
        st.session_state["trie"] = PrefixTrie.from_words(words, normalize=normalize)

trie = st.session_state["trie"]

if page == "Statistics":
    st.header("📊 Statistics")
    stats = trie.stats()

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Strings", f"{stats.num_strings:,}")
    with col2:
        st.metric("Nodes", f"{stats.num_nodes:,}")
    with col3:
        st.metric("Max Depth", stats.max_depth)
    with col4:
        st.metric("Estimated Memory", f"{stats.memory_bytes / 1024:.1f} KB")

    st.dataframe(stats_frame(stats), use_container_width=True)

    counts = depth_histogram(trie)
    fig = px.bar(x=np.arange(counts.size), y=counts,
                 title="Stored strings by length")
    fig.update_layout(xaxis_title="Length", yaxis_title="Strings")
    st.plotly_chart(fig, use_container_width=True)

elif page == "Prefix Match":
    st.header("🔍 Prefix Match")
    prefix = st.text_input("Prefix", value="race")
    limit = st.number_input("Max results (0 = all)", min_value=0, value=0)

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Prefix exists", "yes" if trie.contains(prefix) else "no")
    with col2:
        st.metric("Strings under prefix", trie.count(prefix))

    found = list(trie.match(prefix, k=int(limit) or None))
    if found:
        st.dataframe(match_frame(found), use_container_width=True)
    else:
        st.info("No stored strings start with this prefix")

elif page == "Fuzzy Search":
    st.header("🧭 Fuzzy Search")
    query = st.text_input("Query", value="hallo")
    max_distance = st.slider("Max edit distance", min_value=0, max_value=5, value=1)

    results = fuzzy_frame(trie.match_fuzzy(query, max_distance))
    if results.empty:
        st.info("No stored strings within that distance")
    else:
        st.dataframe(results, use_container_width=True)
        fig = px.histogram(results, x="distance", title="Matches by distance")
        st.plotly_chart(fig, use_container_width=True)

elif page == "Tree View":
    st.header("🌲 Tree View")
    if trie.stats().num_nodes > 2_000:
        st.warning("⚠️ Large trie, rendering may be slow")
    st.code(trie.visualize(), language=None)

elif page == "Import / Export":
    st.header("📁 Import / Export")

    st.download_button(
        "Download JSON",
        data=trie.to_json(),
        file_name="trie.json",
        mime="application/json",
    )

    uploaded_file = st.file_uploader(
        "Load a JSON list of strings",
        type=["json"],
        help="Replaces the current trie contents"
    )
    if uploaded_file is not None:
        loaded = PrefixTrie(normalize=trie.config.normalize)
        if loaded.from_json(uploaded_file.getvalue().decode("utf-8")):
            st.session_state["trie"] = loaded
            st.success(f"✅ Loaded {loaded.size():,} strings")
        else:
            st.error("❌ File is not a JSON list of strings")

# Footer
st.markdown("---")
st.markdown(
    """
    <div style='text-align: center; color: #B0B0B0; padding: 1rem;'>
        Built with Streamlit 🚀 | Prefix Trie Explorer
    </div>
    """,
    unsafe_allow_html=True
)
