import requests, streamlit as st

import config

st.set_page_config(page_title="Lash Analysis", layout="wide")
st.title("Lash Analysis")

API_BASE = config.API_BASE

uploaded = st.file_uploader("Upload an eye photo", type=["jpg", "jpeg", "png", "webp"])
language = st.radio("Language", ["pl", "en"], horizontal=True)
mode = st.selectbox("Report mode", ["standard", "detailed", "pro"])
override = st.selectbox("Lash type", ["auto", "natural", "extensions"])

col1, col2 = st.columns(2)
analyze = col1.button("Analyze")
lash_map = col2.button("Lash map")


def call_api(endpoint, file, data):
    fs = {"image": (file.name, file.getvalue(), file.type or "image/jpeg")}
    r = requests.post(API_BASE + endpoint, files=fs, data=data, timeout=600)
    if not r.ok:
        st.error(f"{endpoint} → {r.status_code}: {r.text}")
        r.raise_for_status()
    return r.json()


if uploaded and (analyze or lash_map):
    c1, c2 = st.columns([1, 2])
    c1.image(uploaded.getvalue(), use_container_width=True)
    with st.spinner("Processing..."):
        if analyze:
            form = {"language": language, "mode": mode}
            if override != "auto":
                form["override_type"] = override
            data = call_api("/analyze", uploaded, form)
            c2.markdown(f"**Type:** {data['type']} · **Mode:** {data['mode']}")
            c2.text(data["result"])
        else:
            data = call_api("/generate-map", uploaded, {"language": language})
            c2.text(data["map"])
else:
    st.info("Upload a photo to enable the buttons.")
